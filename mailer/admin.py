from django.contrib import admin
from .models import MessageLog


@admin.register(MessageLog)
class MessageLogAdmin(admin.ModelAdmin):
    list_display = ("id", "certificate", "kind", "recipient", "sent_at", "provider_id")
    list_filter = ("kind",)
    search_fields = ("recipient", "certificate__certificate_number", "provider_id")
