from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from records.serializers.queries import PharmacyListQuerySerializer
from records.services.queries import (
    PHARMACY_SEARCH_FIELDS,
    apply_search,
    get_low_stock_summary,
    list_pharmacy_items,
)
from records.services.store import get_store
from records.services.summaries import pharmacy_summary


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pharmacy_items(request):
    """Stock list filtered by ``stockStatus``, then by ``search`` over name/code/form."""
    q = PharmacyListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    store = get_store()
    items = list_pharmacy_items(store, q.validated_data)
    return Response({
        'ok': True,
        'data': apply_search(items, q.validated_data['search'], PHARMACY_SEARCH_FIELDS),
        'summary': pharmacy_summary(store.records('pharmacyItems')),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def low_stock(request):
    return Response({'ok': True, 'data': get_low_stock_summary(get_store())})
