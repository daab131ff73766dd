"""
API views for trails app endpoints.
"""
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ResourceNotFound
from swipes.models import Direction
from .models import Trail
from .serializers import TrailSerializer


class SavedTrailsView(APIView):
    """
    Trails the current user swiped right on.

    GET /api/trails/saved/
    """

    def get(self, request):
        trails = Trail.objects.swiped_by(request.user, Direction.RIGHT).prefetch_related('photos')
        serializer = TrailSerializer(trails, many=True)
        return Response({'trails': serializer.data})


class TrailDetailView(APIView):
    """
    GET /api/trails/<id>/
    """

    def get(self, request, trail_id):
        trail = Trail.objects.prefetch_related('photos').find_by_id(trail_id)
        if trail is None:
            raise ResourceNotFound('Trail not found')
        return Response(TrailSerializer(trail).data)
