import logging
from django.utils import timezone
from rest_framework import viewsets
from rest_framework.response import Response
from rest_framework.views import APIView
from certificates.models import Certificate
from certificates.services import filter_certificates
from students.models import Student
from students.services import filter_students
from students.status import UNKNOWN, resolve_status
from .serializers import (
    CertificateSerializer,
    StatusQuerySerializer,
    StudentSerializer,
)

logger = logging.getLogger(__name__)


class StudentViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = StudentSerializer

    def get_queryset(self):
        params = self.request.query_params
        return filter_students(
            Student.objects.prefetch_related("semester_links"),
            query=params.get("q", ""),
            course=params.get("course", ""),
        )

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        ctx["today"] = timezone.localdate()
        return ctx


class CertificateViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = CertificateSerializer

    def get_queryset(self):
        params = self.request.query_params
        return filter_certificates(
            Certificate.objects.select_related("student").prefetch_related(
                "marksheet_links"
            ),
            query=params.get("q", ""),
            course=params.get("course", ""),
            year=params.get("year", ""),
        )


class StatusView(APIView):
    """
    Resolve a status for arbitrary inputs. Always answers 200: bad input is
    reported as "Unknown", which is a displayable status and not an error.
    """

    def get(self, request):
        query = StatusQuerySerializer(data=request.query_params)
        if not query.is_valid():
            logger.info("Status query rejected: %s", query.errors)
            return Response({"status": UNKNOWN})
        data = query.validated_data
        current_date = data["current_date"] or timezone.localdate()
        status = resolve_status(
            data["enrollment_date"],
            data["course_duration_months"],
            data["graduation_date"] or None,
            current_date,
        )
        return Response({"status": status})
