from django.shortcuts import render
from django.utils import timezone
from students.courses import COURSE_CATEGORIES, all_courses
from students.models import Student
from students.services import display_status, status_breakdown
from certificates.models import Certificate
from .decorators import staff_required


def home(request):
    """Public landing page with the course catalogue."""
    ctx = {
        "course_categories": COURSE_CATEGORIES,
        "course_count": len(all_courses()),
        "active_nav": "home",
    }
    return render(request, "home.html", ctx)


@staff_required
def dashboard(request):
    today = timezone.localdate()
    students = Student.objects.only(
        "id", "admission_date", "course_duration_months", "graduation_date"
    )
    recent_students = list(Student.objects.all()[:5])
    recent_certificates = Certificate.objects.select_related("student")[:5]
    ctx = {
        "student_count": Student.objects.count(),
        "certificate_count": Certificate.objects.count(),
        "course_count": len(all_courses()),
        "status_counts": status_breakdown(students, today),
        "recent_students": [
            (s, display_status(s, today)) for s in recent_students
        ],
        "recent_certificates": recent_certificates,
        "active_nav": "dashboard",
    }
    return render(request, "dashboard.html", ctx)
