"""
Admin for chat participants.

Staff can look up who is behind a display name and deactivate accounts;
deactivated users are refused by the API and the WebSocket handshake.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from authentication.models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("email", "display_name", "is_active", "is_staff", "date_joined")
    list_filter = ("is_active", "is_staff")
    search_fields = ("email", "nickname")
    ordering = ("-date_joined",)
    actions = ["deactivate"]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Chat identity", {"fields": ("nickname",)}),
        ("Access", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Dates", {"fields": ("date_joined", "last_login")}),
    )
    readonly_fields = ("date_joined", "last_login")

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "nickname", "password1", "password2"),
            },
        ),
    )

    @admin.display(description="Display name")
    def display_name(self, obj):
        return obj.chat_display_name

    @admin.action(description="Deactivate selected users")
    def deactivate(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"Deactivated {updated} user(s).")
