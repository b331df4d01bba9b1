from django.contrib import admin
from .models import Certificate, MarksheetLink


class MarksheetLinkInline(admin.TabularInline):
    model = MarksheetLink
    extra = 0


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ("certificate_number", "student", "certificate_type", "issue_date", "grade")
    list_filter = ("certificate_type", "grade")
    search_fields = (
        "certificate_number",
        "student__enrollment_number",
        "student__first_name",
        "student__last_name",
    )
    autocomplete_fields = ("student",)
    inlines = [MarksheetLinkInline]
