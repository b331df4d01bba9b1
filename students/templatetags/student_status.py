from django import template
from students.services import display_status
from students.status import COMPLETED, ONGOING

register = template.Library()

BADGE_CLASSES = {
    COMPLETED: "badge-completed",
    ONGOING: "badge-ongoing",
}


@register.inclusion_tag("students/_status_badge.html")
def student_status(student, today=None):
    status = display_status(student, today)
    return {
        "status": status,
        "badge_class": BADGE_CLASSES.get(status, "badge-unknown"),
    }
