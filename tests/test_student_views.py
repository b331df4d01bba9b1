import datetime

import pytest
from django.urls import reverse

from students.models import SemesterLink, Student
from tests.helpers import formset_data


def student_post(**overrides):
    data = {
        "enrollment_number": "JBPI2024001",
        "first_name": "Neha",
        "last_name": "Verma",
        "phone": "9123456780",
        "course": "BCA",
        "program_type": "Degree",
        "batch": "2024-2027",
        "admission_date": "2024-07-01",
        "course_duration_months": "36",
        "status": "Active",
        "certificate_status": "Pending",
    }
    data.update(formset_data("semester_links"))
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_directory_is_public(client, make_student):
    make_student(first_name="Ishaan", last_name="Rao")
    resp = client.get(reverse("students:directory"))
    assert resp.status_code == 200
    assert b"Ishaan Rao" in resp.content


@pytest.mark.django_db
def test_directory_search_and_course_filter(client, make_student):
    make_student(enrollment_number="JBPI7001", first_name="Meera", course="BCA")
    make_student(enrollment_number="JBPI7002", first_name="Arjun", course="MBA")

    resp = client.get(reverse("students:directory"), {"q": "meera"})
    names = [s.first_name for s in resp.context["page_obj"].object_list]
    assert names == ["Meera"]

    resp = client.get(reverse("students:directory"), {"course": "MBA"})
    names = [s.first_name for s in resp.context["page_obj"].object_list]
    assert names == ["Arjun"]
    assert resp.context["course"] == "MBA"


@pytest.mark.django_db
def test_directory_empty_state(client):
    resp = client.get(reverse("students:directory"), {"q": "nobody"})
    assert b"No students found matching your criteria." in resp.content


@pytest.mark.django_db
def test_directory_paginates(client, make_student, settings):
    settings.DIRECTORY_PAGE_SIZE = 10
    for _ in range(12):
        make_student()
    first = client.get(reverse("students:directory"))
    assert len(first.context["page_obj"].object_list) == 10
    second = client.get(reverse("students:directory"), {"page": 2})
    assert len(second.context["page_obj"].object_list) == 2
    assert second.context["page_obj"].start_index() == 11


@pytest.mark.django_db
def test_directory_shows_derived_status(client, make_student):
    make_student(admission_date=datetime.date(2015, 1, 1), course_duration_months=12)
    resp = client.get(reverse("students:directory"))
    assert b"badge-completed" in resp.content


@pytest.mark.django_db
def test_directory_rejects_post(client):
    assert client.post(reverse("students:directory")).status_code == 405


@pytest.mark.django_db
def test_manage_requires_login(client):
    resp = client.get(reverse("students:manage"))
    assert resp.status_code == 302
    assert reverse("account_login") in resp.url


@pytest.mark.django_db
def test_manage_forbidden_for_non_staff(plain_client):
    assert plain_client.get(reverse("students:manage")).status_code == 403
    assert plain_client.post(reverse("students:add"), student_post()).status_code == 403
    assert not Student.objects.exists()


@pytest.mark.django_db
def test_manage_lists_students_for_staff(staff_client, make_student):
    make_student(first_name="Tara")
    resp = staff_client.get(reverse("students:manage"))
    assert resp.status_code == 200
    assert b"Tara" in resp.content


@pytest.mark.django_db
def test_add_form_renders(staff_client):
    resp = staff_client.get(reverse("students:add"))
    assert resp.status_code == 200
    assert b"Enrollment date" in resp.content


@pytest.mark.django_db
def test_add_student(staff_client):
    data = student_post(
        **formset_data(
            "semester_links",
            rows=[{"semester": "Semester 1", "link": "https://drive.example.com/s1"}],
        )
    )
    resp = staff_client.post(reverse("students:add"), data, follow=True)
    assert resp.redirect_chain[-1][0] == reverse("students:manage")
    assert b"Student added successfully!" in resp.content

    student = Student.objects.get(enrollment_number="JBPI2024001")
    assert student.full_name == "Neha Verma"
    assert student.course_duration_months == 36
    assert list(student.semester_links.values_list("semester", flat=True)) == ["Semester 1"]


@pytest.mark.django_db
def test_add_student_rejects_invalid_input(staff_client):
    data = student_post(
        enrollment_number="bad no",
        course_duration_months="0",
    )
    resp = staff_client.post(reverse("students:add"), data)
    assert resp.status_code == 200
    errors = resp.context["form"].errors
    assert "enrollment_number" in errors
    assert "course_duration_months" in errors
    assert not Student.objects.exists()


@pytest.mark.django_db
def test_add_student_rejects_fees_over_total(staff_client):
    data = student_post(total_fees="1000", fees_submitted="5000")
    resp = staff_client.post(reverse("students:add"), data)
    assert resp.status_code == 200
    assert "fees_submitted" in resp.context["form"].errors


@pytest.mark.django_db
def test_add_student_rejects_unknown_course(staff_client):
    resp = staff_client.post(reverse("students:add"), student_post(course="Basket Weaving"))
    assert "course" in resp.context["form"].errors


@pytest.mark.django_db
def test_add_student_rejects_duplicate_enrollment_number(staff_client, make_student):
    make_student(enrollment_number="JBPI2024001")
    resp = staff_client.post(reverse("students:add"), student_post())
    assert resp.status_code == 200
    assert "enrollment_number" in resp.context["form"].errors
    assert Student.objects.count() == 1


@pytest.mark.django_db
def test_edit_student(staff_client, make_student):
    student = make_student(enrollment_number="JBPI2024001")
    link = SemesterLink.objects.create(student=student, semester="Semester 1")
    data = student_post(first_name="Nisha")
    data.update(
        formset_data(
            "semester_links",
            rows=[{"id": str(link.pk), "semester": "Semester 1", "DELETE": "on"}],
            initial=1,
        )
    )
    resp = staff_client.post(reverse("students:edit", args=[student.pk]), data, follow=True)
    assert b"Student updated successfully!" in resp.content
    student.refresh_from_db()
    assert student.first_name == "Nisha"
    assert not student.semester_links.exists()


@pytest.mark.django_db
def test_edit_keeps_legacy_course_selectable(staff_client, make_student):
    student = make_student(course="Retired Course")
    resp = staff_client.get(reverse("students:edit", args=[student.pk]))
    assert ("Retired Course", "Retired Course") in resp.context["form"].fields["course"].choices


@pytest.mark.django_db
def test_edit_missing_student_is_404(staff_client):
    assert staff_client.get(reverse("students:edit", args=[999])).status_code == 404


@pytest.mark.django_db
def test_delete_student(staff_client, make_student, make_certificate):
    student = make_student()
    make_certificate(student)
    resp = staff_client.post(reverse("students:delete", args=[student.pk]), follow=True)
    assert b"Student deleted successfully!" in resp.content
    assert not Student.objects.filter(pk=student.pk).exists()


@pytest.mark.django_db
def test_delete_requires_post(staff_client, make_student):
    student = make_student()
    assert staff_client.get(reverse("students:delete", args=[student.pk])).status_code == 405
    assert Student.objects.filter(pk=student.pk).exists()
