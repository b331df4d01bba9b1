from django.db import models


class MessageLog(models.Model):
    KIND_CHOICES = [("certificate_issued", "Certificate issued")]

    certificate = models.ForeignKey(
        "certificates.Certificate", on_delete=models.CASCADE, related_name="messages"
    )
    kind = models.CharField(max_length=32, choices=KIND_CHOICES)
    recipient = models.EmailField()
    sent_at = models.DateTimeField(auto_now_add=True)
    provider_id = models.CharField(max_length=128, blank=True, null=True)

    class Meta:
        unique_together = [("certificate", "kind")]
