"""
Authentication app.

Provides the identity that chat messages are attributed to:
- Email-based User model with a chat nickname
- JWT issuance (djangorestframework-simplejwt)
- Nickname endpoint

Related apps:
    - chat: Resolves User.chat_display_name when a message is posted
"""
