from django.db import connections
from django.http import JsonResponse

from records.services.store import get_store


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        store = get_store()
        return JsonResponse({
            'ok': True,
            'db': bool(row and row[0] == 1),
            'store': type(store.repository).__name__,
        })
    except Exception as e:
        return JsonResponse({'ok': False, 'error': str(e)}, status=500)
