"""
Chat app for the global real-time chatroom.

This app handles:
- Posting messages and reading recent history
- Broadcasting new messages to every subscriber
- WebSocket delivery of live events
- Client sessions with buffered replay and background-tab alerts
- Push notifications for devices without an open tab

Related apps:
    - authentication: User model and chat display names

WebSocket Support:
    Uses Django Channels for real-time communication.
    See consumers.py for WebSocket handlers.
    See routing.py for WebSocket URL patterns.

Usage:
    from chat.services import ChatService

    # Post a message
    result = ChatService.post_message(text="Hello!", sender=user)

    # Recent history, oldest first
    result = ChatService.get_history()
"""
