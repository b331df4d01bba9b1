def is_records_admin(user) -> bool:
    """Only active staff accounts may create, edit or delete records."""
    if not getattr(user, "is_authenticated", False):
        return False
    return bool(user.is_active and user.is_staff)
