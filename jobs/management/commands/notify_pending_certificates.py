import logging
from django.core.management.base import BaseCommand
from jobs.tasks import notify_certificate_issued, pending_certificate_ids

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Queue (or send with --sync) issued e-mails that never went out"

    def add_arguments(self, parser):
        parser.add_argument(
            "--sync",
            action="store_true",
            help="Send in this process instead of queueing on the mail queue.",
        )

    def handle(self, *args, **options):
        ids = pending_certificate_ids()
        if not ids:
            self.stdout.write("No pending certificate notifications.")
            return
        if not options["sync"]:
            for cid in ids:
                notify_certificate_issued.delay(cid)
            self.stdout.write(self.style.SUCCESS(f"Queued {len(ids)} notifications."))
            return
        sent = failed = 0
        for cid in ids:
            try:
                if notify_certificate_issued(cid):
                    sent += 1
            except Exception as e:
                # one bad recipient must not hold back the rest
                failed += 1
                logger.error("Notification for certificate %s failed: %s", cid, e)
        summary = f"Sent {sent} of {len(ids)} notifications."
        if failed:
            self.stdout.write(self.style.WARNING(f"{summary} {failed} failed."))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
