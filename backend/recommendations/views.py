"""
Views for the trail discovery feed.
"""
from django.conf import settings
from rest_framework.response import Response
from rest_framework.views import APIView

from recommendations.scoring_service import TrailCardService
from recommendations.serializers import (
    PaginationSerializer, TrailCardSerializer, TrailCardsQuerySerializer,
)


class TrailCardsView(APIView):
    """
    Ranked, paginated trail cards for the current user.

    GET /api/trails/cards/?page=1&limit=20&maxDistance=10&difficulty=easy,moderate&tags=scenic&elevation=low
    """

    def get(self, request):
        query = TrailCardsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        limit = query.validated_data.get('limit') or getattr(settings, 'TRAIL_CARDS_DEFAULT_PAGE_SIZE', 20)
        result = TrailCardService().get_cards(
            request.user,
            query.to_criteria(),
            page=query.validated_data['page'],
            limit=limit,
        )

        return Response({
            'trails': TrailCardSerializer(result.items, many=True, context={'request': request}).data,
            'pagination': PaginationSerializer(result.pagination).data,
        })
