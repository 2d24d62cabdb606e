"""
Views for chat API.

URL Structure:
    /api/v1/chat/messages/    GET (history), POST (post a message)

Design Decisions:
    - History is public; posting requires an authenticated sender
    - All operations use the service layer for business logic
    - Posting does not return the message to other clients; they receive
      it through the channel layer broadcast
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from chat.constants import CHAT_CONFIG
from chat.serializers import (
    HistoryQuerySerializer,
    MessageCreateSerializer,
    MessageSerializer,
)
from chat.services import ChatService


class MessageListCreateView(APIView):
    """
    Global chatroom messages.

    GET /api/v1/chat/messages/
        Most recent messages, oldest first.

    POST /api/v1/chat/messages/
        Post a message as the authenticated user.
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        operation_id="get_chat_history",
        summary="Get chat history",
        description=(
            "Return the most recent messages of the global chatroom in "
            "chronological order (oldest first), ready to render top to bottom. "
            f"Defaults to the last {CHAT_CONFIG.HISTORY_LIMIT} messages."
        ),
        parameters=[
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
                description=(
                    f"Number of messages (1-{CHAT_CONFIG.MAX_HISTORY_LIMIT})"
                ),
            ),
        ],
        responses={
            200: MessageSerializer(many=True),
            400: OpenApiResponse(description="Invalid limit"),
            503: OpenApiResponse(description="History is temporarily unavailable"),
        },
        tags=["Chat - Messages"],
    )
    def get(self, request):
        query = HistoryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = ChatService.get_history(limit=query.validated_data.get("limit"))

        if not result.success:
            return Response(
                {"error": result.error, "error_code": result.error_code},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(MessageSerializer(result.data, many=True).data)

    @extend_schema(
        operation_id="post_chat_message",
        summary="Post a message",
        description=(
            "Post a message to the global chatroom. The message is stored and "
            "broadcast on the chat channel, including back to the sender. "
            "Text that is empty after trimming is ignored (204)."
        ),
        request=MessageCreateSerializer,
        responses={
            201: MessageSerializer,
            204: OpenApiResponse(description="Empty text ignored"),
            400: OpenApiResponse(description="Invalid request"),
            401: OpenApiResponse(description="Authentication required"),
        },
        tags=["Chat - Messages"],
    )
    def post(self, request):
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ChatService.post_message(
            text=serializer.validated_data["text"],
            sender=request.user,
        )

        if not result.success:
            return Response(
                {"error": result.error, "error_code": result.error_code},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if result.data is None:
            return Response(status=status.HTTP_204_NO_CONTENT)

        return Response(
            MessageSerializer(result.data).data,
            status=status.HTTP_201_CREATED,
        )
