from allauth.account.adapter import DefaultAccountAdapter
from django.conf import settings
from django.urls import reverse

from .permissions import is_records_admin


class AdminAccountAdapter(DefaultAccountAdapter):
    """Accounts exist for the records office; the public never signs in."""

    def is_open_for_signup(self, request):
        return bool(getattr(settings, "ACCOUNT_ALLOW_SIGNUP", False))

    def get_login_redirect_url(self, request):
        # non-staff accounts would only hit a 403 on the dashboard
        if not is_records_admin(request.user):
            return reverse("home")
        return super().get_login_redirect_url(request)

    def is_email_verified(self, request, email):
        site = getattr(settings, "SITE_URL", "")
        if site.startswith("http://localhost:8000"):
            return True
        return super().is_email_verified(request, email)
