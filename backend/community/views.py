"""
API views for friendship endpoints.
"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import (
    FriendRequestSerializer, FriendSerializer, FriendshipActionSerializer,
    FriendshipSerializer, FriendshipStatusSerializer, InviteSerializer,
)
from .services import FriendshipService


class FriendshipViewSet(viewsets.ViewSet):
    """
    Friend list and the request lifecycle (invite, accept, decline).
    """

    service = FriendshipService()

    def list(self, request):
        """Accepted friends plus requests waiting on the current user."""
        context = {'request': request}
        friends = self.service.friends_of(request.user)
        pending = self.service.incoming_requests(request.user)
        return Response({
            'friends': FriendSerializer(friends, many=True, context=context).data,
            'pendingRequests': FriendSerializer(pending, many=True, context=context).data,
        })

    @action(detail=False, methods=['post'])
    def invite(self, request):
        serializer = InviteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        friendship = self.service.invite(request.user, serializer.validated_data['friendEmail'])
        return Response(FriendshipSerializer(friendship).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def accept(self, request):
        serializer = FriendshipActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        friendship = self.service.accept(serializer.validated_data['friendshipId'], request.user)
        return Response(FriendshipStatusSerializer(friendship).data)

    @action(detail=False, methods=['post'])
    def decline(self, request):
        serializer = FriendshipActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.service.decline(serializer.validated_data['friendshipId'], request.user)
        return Response({'message': 'Friend request declined'})

    @action(detail=False, methods=['get'])
    def requests(self, request):
        pending = self.service.incoming_requests(request.user)
        return Response({'requests': FriendRequestSerializer(pending, many=True).data})
