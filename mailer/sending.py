import logging
from anymail.message import AnymailMessage
from django.conf import settings
from django.db import IntegrityError, transaction
from .models import MessageLog
from .rendering import CERTIFICATE_ISSUED, render_email

logger = logging.getLogger(__name__)


def _claim(certificate, kind, recipient):
    """Insert the log row first; the (certificate, kind) constraint lets one sender win."""
    try:
        with transaction.atomic():
            return MessageLog.objects.create(
                certificate=certificate, kind=kind, recipient=recipient
            )
    except IntegrityError:
        return None


def send_certificate_issued(certificate) -> bool:
    """
    E-mail the student that a certificate was issued. Sends at most once per
    certificate; returns False when nothing was sent. A failed send releases
    its claim so the certificate stays pending for a retry.
    """
    student = certificate.student
    if not student.email:
        return False
    kind = CERTIFICATE_ISSUED["key"]
    log = _claim(certificate, kind, student.email)
    if log is None:
        logger.info("Certificate %s already notified; skipping", certificate.pk)
        return False
    context = {
        "student": student,
        "certificate": certificate,
        "marksheet_links": list(certificate.marksheet_links.all()),
        "site_url": settings.SITE_URL,
        "institute_name": settings.INSTITUTE_NAME,
        "subject_vars": {
            "institute": settings.INSTITUTE_NAME,
            "certificate_type": certificate.get_certificate_type_display().lower(),
            "certificate_number": certificate.certificate_number,
        },
    }
    try:
        subject, text, html = render_email(CERTIFICATE_ISSUED, context)
        msg = AnymailMessage(subject=subject, to=[student.email])
        if text:
            msg.body = text
        msg.attach_alternative(html, "text/html")
        msg.metadata = {"certificate_id": certificate.id, "student_id": student.id}
        msg.tags = [kind]
        msg.send()
    except Exception:
        log.delete()
        raise
    status = getattr(msg, "anymail_status", None)
    provider_id = getattr(status, "message_id", None)
    if provider_id:
        log.provider_id = provider_id
        log.save(update_fields=["provider_id"])
    logger.info(
        "Certificate %s issued notification sent to student %s",
        certificate.pk,
        student.pk,
    )
    return True
