"""
Views for authentication API.

Token issuance is provided by djangorestframework-simplejwt; this module adds
the chat nickname endpoint.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.serializers import NicknameSerializer, UserSerializer
from authentication.services import NicknameService


class NicknameView(APIView):
    """
    API view for the current user's chat nickname.

    GET: Current nickname and resolved display name
    PATCH: Set or clear the nickname

    URL: /api/v1/auth/nickname/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="get_nickname",
        summary="Get chat nickname",
        tags=["Auth - Nickname"],
        responses={200: UserSerializer},
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)

    @extend_schema(
        operation_id="set_nickname",
        summary="Set chat nickname",
        description=(
            "Set the name shown on messages you post from now on. "
            "A blank nickname falls back to your email's local part."
        ),
        tags=["Auth - Nickname"],
        request=NicknameSerializer,
        responses={200: UserSerializer},
    )
    def patch(self, request):
        """
        Request body:
            {"nickname": "Princess Peach"}
        """
        serializer = NicknameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = NicknameService.set_nickname(
            request.user, serializer.validated_data["nickname"]
        )
        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(result.data).data)
