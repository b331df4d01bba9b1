from django.contrib import admin
from .models import SemesterLink, Student


class SemesterLinkInline(admin.TabularInline):
    model = SemesterLink
    extra = 0


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "enrollment_number",
        "first_name",
        "last_name",
        "course",
        "batch",
        "status",
    )
    list_filter = ("program_type", "status", "certificate_status", "course")
    search_fields = ("enrollment_number", "first_name", "last_name", "phone")
    inlines = [SemesterLinkInline]
