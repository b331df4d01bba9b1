import logging
from collections import Counter

from django.conf import settings
from django.core.paginator import Paginator
from django.db.models import Q, Value
from django.db.models.functions import Concat
from django.utils import timezone

from .courses import ALL_FILTER_VALUE
from .status import COMPLETED, ONGOING, UNKNOWN

logger = logging.getLogger(__name__)


def display_status(student, today=None) -> str:
    """
    Derived status for rendering. Any failure while deriving it degrades to
    UNKNOWN so a single bad record never breaks a listing.
    """
    if today is None:
        today = timezone.localdate()
    try:
        return student.status_on(today)
    except Exception:
        logger.exception(
            "Status derivation failed for student %s", getattr(student, "pk", None)
        )
        return UNKNOWN


def status_breakdown(students, today=None):
    if today is None:
        today = timezone.localdate()
    counts = Counter(display_status(s, today) for s in students)
    return {
        COMPLETED: counts.get(COMPLETED, 0),
        ONGOING: counts.get(ONGOING, 0),
        UNKNOWN: counts.get(UNKNOWN, 0),
    }


def with_search_name(qs, prefix=""):
    """Annotate "first last" so a search can match across both names."""
    return qs.annotate(
        search_name=Concat(
            f"{prefix}first_name", Value(" "), f"{prefix}last_name"
        )
    )


def name_or_number_q(query, prefix=""):
    # expects a queryset passed through with_search_name
    return Q(search_name__icontains=query) | Q(
        **{f"{prefix}enrollment_number__icontains": query}
    )


def filter_students(qs, query="", course=""):
    query = (query or "").strip()
    course = (course or "").strip()
    if query:
        qs = with_search_name(qs).filter(name_or_number_q(query))
    if course and course != ALL_FILTER_VALUE:
        qs = qs.filter(course=course)
    return qs


def paginate(request, qs, per_page=None):
    paginator = Paginator(qs, per_page or settings.DIRECTORY_PAGE_SIZE)
    return paginator.get_page(request.GET.get("page"))
