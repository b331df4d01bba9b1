import datetime
import itertools

import pytest


_enrollment_seq = itertools.count(1)


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_staff(
        email="office@example.com", password="s3cret-pass"
    )


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.fixture
def plain_client(client, django_user_model):
    user = django_user_model.objects.create_user(
        email="visitor@example.com", password="s3cret-pass"
    )
    client.force_login(user)
    return client


@pytest.fixture
def make_student(db):
    from students.models import Student

    def _make(**overrides):
        n = next(_enrollment_seq)
        fields = {
            "enrollment_number": f"JBPI{2021000 + n}",
            "first_name": "Aarav",
            "last_name": "Sharma",
            "phone": "9876543210",
            "course": "BCA",
            "program_type": "Degree",
            "batch": "2021-2023",
            "admission_date": datetime.date(2021, 8, 15),
            "course_duration_months": 24,
        }
        fields.update(overrides)
        return Student.objects.create(**fields)
    return _make


@pytest.fixture
def make_certificate(db):
    from certificates.models import Certificate

    def _make(student, **overrides):
        fields = {
            "certificate_number": f"CERT-{student.enrollment_number}-{student.pk:06d}",
            "certificate_type": "completion",
            "issue_date": datetime.date(2023, 7, 20),
        }
        fields.update(overrides)
        return Certificate.objects.create(student=student, **fields)
    return _make
