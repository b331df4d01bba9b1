import logging
from django.contrib import messages
from django.db import DatabaseError, transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST
from accounts.decorators import staff_required
from .courses import ALL_FILTER_VALUE, COURSE_FILTER_OPTIONS
from .forms import SemesterLinkFormSet, StudentForm
from .models import Student
from .services import filter_students, paginate

logger = logging.getLogger(__name__)


def _directory_context(request):
    query = request.GET.get("q", "").strip()
    course = request.GET.get("course") or ALL_FILTER_VALUE
    qs = filter_students(Student.objects.all(), query=query, course=course)
    return {
        "page_obj": paginate(request, qs),
        "query": query,
        "course": course,
        "course_options": COURSE_FILTER_OPTIONS,
    }


@require_GET
def directory(request):
    """Public, read-only student directory (no auth required)."""
    ctx = _directory_context(request)
    ctx["active_nav"] = "students"
    return render(request, "students/directory.html", ctx)


@staff_required
def manage(request):
    ctx = _directory_context(request)
    ctx["active_nav"] = "manage_students"
    return render(request, "students/manage.html", ctx)


def _save_student(request, student, success_message, failure_message):
    if request.method == "POST":
        form = StudentForm(request.POST, instance=student)
        formset = SemesterLinkFormSet(request.POST, instance=student)
        if form.is_valid() and formset.is_valid():
            try:
                with transaction.atomic():
                    student = form.save()
                    formset.instance = student
                    formset.save()
            except DatabaseError:
                logger.exception(
                    "Saving student %s failed",
                    form.cleaned_data.get("enrollment_number"),
                )
                messages.error(request, failure_message)
            else:
                logger.info(
                    "Student %s (%s) saved by user %s",
                    student.pk,
                    student.enrollment_number,
                    request.user.pk,
                )
                messages.success(request, success_message)
                return redirect("students:manage")
    else:
        form = StudentForm(instance=student)
        formset = SemesterLinkFormSet(instance=student)
    return render(
        request,
        "students/form.html",
        {
            "form": form,
            "formset": formset,
            "student": student if student.pk else None,
            "active_nav": "manage_students",
        },
    )


@staff_required
def add_student(request):
    return _save_student(
        request,
        Student(),
        "Student added successfully!",
        "Failed to add student. Please try again.",
    )


@staff_required
def edit_student(request, pk: int):
    student = get_object_or_404(Student, pk=pk)
    return _save_student(
        request,
        student,
        "Student updated successfully!",
        "Failed to update student. Please try again.",
    )


@staff_required
@require_POST
def delete_student(request, pk: int):
    student = get_object_or_404(Student, pk=pk)
    label = str(student)
    try:
        student.delete()
    except DatabaseError:
        logger.exception("Deleting student %s failed", pk)
        messages.error(request, "Failed to delete student. Please try again.")
    else:
        logger.info("Student %s (%s) deleted by user %s", pk, label, request.user.pk)
        messages.success(request, "Student deleted successfully!")
    return redirect("students:manage")
