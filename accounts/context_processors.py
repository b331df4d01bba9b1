from django.conf import settings
from .permissions import is_records_admin


def institute(request):
    user = getattr(request, "user", None)
    return {
        "institute_name": settings.INSTITUTE_NAME,
        "is_records_admin": is_records_admin(user),
    }
