from django.utils import timezone
from rest_framework import serializers
from certificates.models import Certificate, MarksheetLink
from students.models import SemesterLink, Student
from students.services import display_status


class SemesterLinkSerializer(serializers.ModelSerializer):
    class Meta:
        model = SemesterLink
        fields = ["semester", "link"]


class MarksheetLinkSerializer(serializers.ModelSerializer):
    class Meta:
        model = MarksheetLink
        fields = ["semester", "link"]


class StudentSerializer(serializers.ModelSerializer):
    """Public directory view of a student; contact and fee details stay private."""

    name = serializers.CharField(source="full_name", read_only=True)
    derived_status = serializers.SerializerMethodField()
    semester_links = SemesterLinkSerializer(many=True, read_only=True)

    class Meta:
        model = Student
        fields = [
            "id",
            "enrollment_number",
            "name",
            "course",
            "program_type",
            "batch",
            "admission_date",
            "course_duration_months",
            "graduation_date",
            "derived_status",
            "semester_links",
        ]

    def get_derived_status(self, obj):
        today = self.context.get("today") or timezone.localdate()
        return display_status(obj, today)


class CertificateSerializer(serializers.ModelSerializer):
    student_name = serializers.CharField(source="student.full_name", read_only=True)
    enrollment_number = serializers.CharField(
        source="student.enrollment_number", read_only=True
    )
    course = serializers.CharField(source="student.course", read_only=True)
    program_type = serializers.CharField(source="student.program_type", read_only=True)
    marksheet_links = MarksheetLinkSerializer(many=True, read_only=True)

    class Meta:
        model = Certificate
        fields = [
            "id",
            "certificate_number",
            "certificate_type",
            "issue_date",
            "grade",
            "percentage",
            "gdrive_link",
            "student_name",
            "enrollment_number",
            "course",
            "program_type",
            "marksheet_links",
        ]


class StatusQuerySerializer(serializers.Serializer):
    # raw strings: malformed values must reach the resolver and come back Unknown
    enrollment_date = serializers.CharField(required=True, allow_blank=True)
    course_duration_months = serializers.CharField(required=False, allow_blank=True, default="")
    graduation_date = serializers.CharField(required=False, allow_blank=True, default="")
    current_date = serializers.CharField(required=False, allow_blank=True, default="")
