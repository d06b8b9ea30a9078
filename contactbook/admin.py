"""Contactbook admin."""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from contactbook.models import Contact, ContactHistoryEvent, EventType


# ===========================================
# Inline Classes (must be defined before ContactAdmin)
# ===========================================


class RecentHistoryInline(admin.TabularInline):
    model = ContactHistoryEvent
    extra = 0
    fields = ["event_type", "date"]
    readonly_fields = ["event_type", "date"]
    ordering = ["-date"]
    max_num = 10
    verbose_name_plural = "History (last 10)"

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# ===========================================
# Contact Admin
# ===========================================


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "twitter", "favorite", "created_at"]
    list_filter = ["favorite"]
    search_fields = ["id", "first", "last", "twitter"]
    list_editable = ["favorite"]
    readonly_fields = ["id", "created_at"]
    inlines = [RecentHistoryInline]

    fieldsets = [
        ("Identification", {"fields": ["id", "first", "last"]}),
        ("Profile", {"fields": ["twitter", "avatar", "notes", "favorite"]}),
        ("System", {"fields": ["created_at"], "classes": ["collapse"]}),
    ]


# ===========================================
# ContactHistoryEvent Admin
# ===========================================

EVENT_TYPE_COLORS = {
    EventType.CREATED: "#28a745",
    EventType.UPDATED: "#007bff",
    EventType.FAVORITED: "#ffc107",
    EventType.UNFAVORITED: "#6c757d",
    EventType.DELETED: "#dc3545",
}


@admin.register(ContactHistoryEvent)
class ContactHistoryEventAdmin(admin.ModelAdmin):
    list_display = ["date", "event_type_badge", "contact_link"]
    list_filter = ["event_type"]
    search_fields = ["contact__id", "contact__first", "contact__last"]
    raw_id_fields = ["contact"]
    readonly_fields = ["date", "changes"]
    date_hierarchy = "date"
    ordering = ["-date"]

    @admin.display(description="Type", ordering="event_type")
    def event_type_badge(self, obj):
        return format_html(
            '<span class="event-badge" style="background:{}">{}</span>',
            EVENT_TYPE_COLORS.get(obj.event_type, "#6c757d"),
            obj.get_event_type_display(),
        )

    @admin.display(description="Contact", ordering="contact__last")
    def contact_link(self, obj):
        url = reverse("admin:contactbook_contact_change", args=[obj.contact_id])
        return format_html('<a href="{}">{}</a>', url, obj.contact)
