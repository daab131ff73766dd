from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Match
from .serializers import (
    MatchSerializer, MatchSummarySerializer, SwipeCreateSerializer, SwipeSerializer,
)
from .services import SwipeRecorder


class SwipeView(APIView):
    """
    POST /api/swipes/ records a swipe; GET lists the user's swipe history.
    """

    def post(self, request):
        serializer = SwipeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        outcome = SwipeRecorder().record(
            request.user,
            serializer.validated_data['trailId'],
            serializer.validated_data['direction'],
        )

        data = SwipeSerializer(outcome.swipe).data
        if outcome.match is not None:
            data['match'] = MatchSummarySerializer(outcome.match).data
        return Response(data, status=status.HTTP_201_CREATED)

    def get(self, request):
        swipes = SwipeRecorder().swipes_for(request.user)
        return Response({'swipes': SwipeSerializer(swipes, many=True).data})


class ClearSwipesView(APIView):
    """Maintenance reset of the current user's swipes."""

    def post(self, request):
        cleared, remaining = SwipeRecorder().clear(request.user)
        return Response({
            'message': 'Swipes cleared successfully',
            'cleared': cleared,
            'remaining': remaining,
        })


class MatchListView(APIView):

    def get(self, request):
        matches = Match.objects.for_user(request.user)
        serializer = MatchSerializer(matches, many=True, context={'request': request})
        return Response({'matches': serializer.data})
