import logging
from functools import wraps
from django.contrib.auth.decorators import login_required
from django.http import HttpResponseForbidden
from .permissions import is_records_admin

logger = logging.getLogger(__name__)


def staff_required(view_func):
    """
    Guard for write-capable administrative views. Anonymous users are sent to
    the login page; signed-in users without staff rights get a 403.
    """
    @wraps(view_func)
    @login_required
    def _wrapped(request, *args, **kwargs):
        if not is_records_admin(request.user):
            logger.warning(
                "Permission denied: user %s is not a records admin (%s)",
                request.user.pk,
                request.path,
            )
            return HttpResponseForbidden("Not authorized")
        return view_func(request, *args, **kwargs)
    return _wrapped
