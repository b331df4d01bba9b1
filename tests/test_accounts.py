import datetime

import pytest
from django.urls import reverse

from accounts.adapter import AdminAccountAdapter
from accounts.permissions import is_records_admin
from students.courses import all_courses


@pytest.mark.django_db
def test_home_lists_course_catalogue(client):
    resp = client.get(reverse("home"))
    assert resp.status_code == 200
    assert resp.context["course_count"] == len(all_courses())
    assert b"Paramedical Courses" in resp.content


@pytest.mark.django_db
def test_dashboard_requires_login(client):
    resp = client.get(reverse("dashboard"))
    assert resp.status_code == 302
    assert reverse("account_login") in resp.url


@pytest.mark.django_db
def test_dashboard_forbidden_for_non_staff(plain_client):
    assert plain_client.get(reverse("dashboard")).status_code == 403


@pytest.mark.django_db
def test_dashboard_counts(staff_client, make_student, make_certificate):
    done = make_student(admission_date=datetime.date(2015, 1, 1), course_duration_months=12)
    make_student(admission_date=datetime.date(2015, 1, 1), course_duration_months=12,
                 graduation_date=datetime.date(2999, 1, 1))
    make_certificate(done)

    resp = staff_client.get(reverse("dashboard"))
    assert resp.status_code == 200
    ctx = resp.context
    assert ctx["student_count"] == 2
    assert ctx["certificate_count"] == 1
    assert ctx["status_counts"] == {"Completed": 1, "Ongoing": 1, "Unknown": 0}
    assert len(ctx["recent_students"]) == 2
    assert [c.pk for c in ctx["recent_certificates"]] == [done.certificates.get().pk]


@pytest.mark.django_db
def test_records_admin_permission(django_user_model, staff_user):
    member = django_user_model.objects.create_user(email="m@example.com", password="x")
    assert is_records_admin(staff_user)
    assert not is_records_admin(member)

    staff_user.is_active = False
    assert not is_records_admin(staff_user)


@pytest.mark.django_db
def test_user_manager(django_user_model):
    user = django_user_model.objects.create_superuser(email="root@example.com", password="x")
    assert user.is_staff and user.is_superuser
    assert str(user) == "root@example.com"
    with pytest.raises(ValueError):
        django_user_model.objects.create_user(email="", password="x")


def test_signup_closed_by_default(rf, settings):
    settings.ACCOUNT_ALLOW_SIGNUP = False
    assert AdminAccountAdapter().is_open_for_signup(rf.get("/")) is False
    settings.ACCOUNT_ALLOW_SIGNUP = True
    assert AdminAccountAdapter().is_open_for_signup(rf.get("/")) is True


@pytest.mark.django_db
def test_login_redirect_depends_on_staff_rights(rf, staff_user, django_user_model):
    request = rf.get("/")
    request.user = staff_user
    assert AdminAccountAdapter().get_login_redirect_url(request) == reverse("dashboard")

    request.user = django_user_model.objects.create_user(email="v@example.com", password="x")
    assert AdminAccountAdapter().get_login_redirect_url(request) == reverse("home")
