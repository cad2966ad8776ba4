import secrets
import string
import time

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError('base-36 encoding expects a non-negative integer')
    if n == 0:
        return '0'
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(BASE36_ALPHABET[rem])
    return ''.join(reversed(digits))


def generate_id(prefix: str = 'ID') -> str:
    """Return ``<prefix>-<6 random base-36 chars>-<base-36 ms timestamp>``.

    Unique enough for a single writer; not a security token.
    """
    fragment = ''.join(secrets.choice(BASE36_ALPHABET) for _ in range(6))
    return f"{prefix}-{fragment}-{to_base36(int(time.time() * 1000))}"
