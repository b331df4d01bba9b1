import logging
from django_rq import job
from certificates.models import Certificate
from mailer.sending import send_certificate_issued

logger = logging.getLogger(__name__)


def pending_certificate_ids():
    """Certificates whose holder has an e-mail but was never notified."""
    return list(
        Certificate.objects.exclude(student__email="")
        .exclude(messages__kind="certificate_issued")
        .order_by("id")
        .values_list("id", flat=True)
    )


@job("mail")
def notify_certificate_issued(certificate_id: int):
    certificate = (
        Certificate.objects.select_related("student")
        .filter(pk=certificate_id)
        .first()
    )
    if not certificate:
        # deleted between issue and delivery
        logger.warning("Certificate %s no longer exists; not notifying", certificate_id)
        return False
    try:
        return send_certificate_issued(certificate)
    except Exception:
        logger.exception("Issued notification for certificate %s failed", certificate_id)
        raise
