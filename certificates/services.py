import logging
import time
from django.conf import settings
from django.db import transaction
from django.db.models import Q
from redis.exceptions import RedisError
from students.courses import ALL_FILTER_VALUE
from students.models import Student
from students.services import name_or_number_q, with_search_name
from .models import Certificate

logger = logging.getLogger(__name__)

ELIGIBLE_STUDENT_STATUSES = ("Active", "Completed")


def eligible_students(query=""):
    """Students a certificate may be issued to, optionally searched."""
    qs = Student.objects.filter(status__in=ELIGIBLE_STUDENT_STATUSES)
    query = (query or "").strip()
    if query:
        qs = with_search_name(qs).filter(name_or_number_q(query))
    return qs.order_by("first_name", "last_name", "id")


def generate_certificate_number(student, millis=None):
    """
    CERT-<enrollment number>-<last six digits of a millisecond timestamp>.
    On collision the stamp is advanced until a free number is found.
    """
    if millis is None:
        millis = int(time.time() * 1000)
    for offset in range(1000):
        stamp = f"{(millis + offset) % 1_000_000:06d}"
        number = f"CERT-{student.enrollment_number}-{stamp}"
        if not Certificate.objects.filter(certificate_number=number).exists():
            return number
    raise RuntimeError(
        f"No free certificate number for {student.enrollment_number}"
    )


def filter_certificates(qs, query="", course="", year=""):
    query = (query or "").strip()
    course = (course or "").strip()
    year = (year or "").strip()
    if query:
        qs = with_search_name(qs, prefix="student__").filter(
            name_or_number_q(query, prefix="student__")
            | Q(certificate_number__icontains=query)
        )
    if course and course != ALL_FILTER_VALUE:
        qs = qs.filter(student__course=course)
    if year and year != ALL_FILTER_VALUE and year.isdigit():
        qs = qs.filter(issue_date__year=int(year))
    return qs


def issue_years():
    return [d.year for d in Certificate.objects.dates("issue_date", "year", order="DESC")]


def _enqueue_issued_notification(certificate_id):
    from jobs.tasks import notify_certificate_issued
    try:
        notify_certificate_issued.delay(certificate_id)
    except RedisError as e:
        logger.error(
            "Could not queue issued notification for certificate %s: %s",
            certificate_id,
            e,
        )


def queue_issued_notification(certificate):
    """Queue the "certificate issued" e-mail once the transaction commits."""
    if not getattr(settings, "CERTIFICATE_NOTIFICATIONS", True):
        return False
    if not certificate.student.email:
        logger.info(
            "Certificate %s: student %s has no e-mail, notification skipped",
            certificate.pk,
            certificate.student_id,
        )
        return False
    certificate_id = certificate.pk
    transaction.on_commit(lambda: _enqueue_issued_notification(certificate_id))
    return True
