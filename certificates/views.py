import logging
from django.contrib import messages
from django.db import DatabaseError, transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST
from accounts.decorators import staff_required
from students.courses import ALL_FILTER_VALUE, COURSE_FILTER_OPTIONS
from students.services import paginate
from .forms import CertificateForm, MarksheetLinkFormSet
from .models import Certificate
from .services import filter_certificates, issue_years, queue_issued_notification

logger = logging.getLogger(__name__)


def _listing_context(request):
    query = request.GET.get("q", "").strip()
    course = request.GET.get("course") or ALL_FILTER_VALUE
    year = request.GET.get("year") or ALL_FILTER_VALUE
    qs = filter_certificates(
        Certificate.objects.select_related("student"),
        query=query,
        course=course,
        year=year,
    )
    return {
        "page_obj": paginate(request, qs),
        "query": query,
        "course": course,
        "year": year,
        "course_options": COURSE_FILTER_OPTIONS,
        "year_options": [str(y) for y in issue_years()],
    }


@require_GET
def listing(request):
    """Public certificate listing (no auth required)."""
    ctx = _listing_context(request)
    ctx["active_nav"] = "certificates"
    return render(request, "certificates/listing.html", ctx)


@staff_required
def manage(request):
    ctx = _listing_context(request)
    ctx["active_nav"] = "manage_certificates"
    return render(request, "certificates/manage.html", ctx)


def _save_certificate(request, certificate, success_message, failure_message):
    created = certificate.pk is None
    student_query = request.GET.get("student_q", "").strip()
    if request.method == "POST":
        form = CertificateForm(request.POST, instance=certificate)
        formset = MarksheetLinkFormSet(request.POST, instance=certificate)
        # the formset reads the chosen student from the instance the form fills
        form_ok = form.is_valid()
        formset_ok = formset.is_valid()
        if form_ok and formset_ok:
            try:
                with transaction.atomic():
                    certificate = form.save()
                    formset.instance = certificate
                    formset.save()
                    if created:
                        queue_issued_notification(certificate)
            except DatabaseError:
                logger.exception(
                    "Saving certificate %s failed",
                    form.cleaned_data.get("certificate_number"),
                )
                messages.error(request, failure_message)
            else:
                logger.info(
                    "Certificate %s (%s) for student %s saved by user %s",
                    certificate.pk,
                    certificate.certificate_number,
                    certificate.student_id,
                    request.user.pk,
                )
                messages.success(request, success_message)
                return redirect("certificates:manage")
    else:
        initial = {}
        if created and request.GET.get("student", "").isdigit():
            initial["student"] = int(request.GET["student"])
        form = CertificateForm(
            instance=certificate, initial=initial, student_query=student_query
        )
        formset = MarksheetLinkFormSet(instance=certificate)
    return render(
        request,
        "certificates/form.html",
        {
            "form": form,
            "formset": formset,
            "certificate": None if created else certificate,
            "student_query": student_query,
            "active_nav": "manage_certificates",
        },
    )


@staff_required
def add_certificate(request):
    return _save_certificate(
        request,
        Certificate(),
        "Certificate added successfully!",
        "Failed to add certificate. Please try again.",
    )


@staff_required
def edit_certificate(request, pk: int):
    certificate = get_object_or_404(Certificate, pk=pk)
    return _save_certificate(
        request,
        certificate,
        "Certificate updated successfully!",
        "Failed to update certificate. Please try again.",
    )


@staff_required
@require_POST
def delete_certificate(request, pk: int):
    certificate = get_object_or_404(Certificate, pk=pk)
    number = certificate.certificate_number
    try:
        certificate.delete()
    except DatabaseError:
        logger.exception("Deleting certificate %s failed", pk)
        messages.error(request, "Failed to delete certificate. Please try again.")
    else:
        logger.info("Certificate %s (%s) deleted by user %s", pk, number, request.user.pk)
        messages.success(request, "Certificate deleted successfully!")
    return redirect("certificates:manage")
