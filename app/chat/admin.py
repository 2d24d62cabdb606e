"""
Django admin configuration for chat models.

Messages are immutable, so the admin is a read-only moderation view.
"""

from django.contrib import admin

from chat.models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    """Read-only admin interface for Message model."""

    list_display = ["id", "username", "text_preview", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["username", "text"]
    readonly_fields = ["id", "text", "username", "created_at"]
    ordering = ["-created_at"]
    date_hierarchy = "created_at"

    @admin.display(description="Text")
    def text_preview(self, obj: Message) -> str:
        if len(obj.text) > 80:
            return obj.text[:77] + "..."
        return obj.text

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
