import datetime
from decimal import Decimal
from unittest import mock

import pytest
from django.core.exceptions import ValidationError

from students.models import Student
from students.services import display_status, filter_students, status_breakdown
from students.status import COMPLETED, ONGOING, UNKNOWN


@pytest.mark.django_db
def test_full_name_and_str(make_student):
    student = make_student(enrollment_number="JBPI9001", first_name="Priya", last_name="")
    assert student.full_name == "Priya"
    assert str(student) == "Priya (JBPI9001)"


@pytest.mark.django_db
def test_fees_submitted_cannot_exceed_total(make_student):
    student = make_student(total_fees=Decimal("50000"), fees_submitted=Decimal("60000"))
    with pytest.raises(ValidationError) as exc:
        student.full_clean()
    assert "fees_submitted" in exc.value.message_dict


@pytest.mark.django_db
def test_fees_within_total_are_valid(make_student):
    student = make_student(total_fees=Decimal("50000"), fees_submitted=Decimal("20000"))
    student.full_clean()


@pytest.mark.django_db
@pytest.mark.parametrize("number", ["jbpi2021", "JB-2021", "AB1"])
def test_enrollment_number_must_be_uppercase_alphanumeric(make_student, number):
    student = make_student()
    student.enrollment_number = number
    with pytest.raises(ValidationError) as exc:
        student.full_clean()
    assert "enrollment_number" in exc.value.message_dict


@pytest.mark.django_db
def test_aadhar_and_pincode_formats(make_student):
    student = make_student(aadhar_number="1234", pincode="12")
    with pytest.raises(ValidationError) as exc:
        student.full_clean()
    assert {"aadhar_number", "pincode"} <= set(exc.value.message_dict)


@pytest.mark.django_db
def test_defaults(make_student):
    student = make_student()
    assert student.status == "Active"
    assert student.certificate_status == "Pending"


@pytest.mark.django_db
def test_status_on_uses_recorded_fields(make_student):
    student = make_student(
        admission_date=datetime.date(2021, 8, 15),
        course_duration_months=24,
        graduation_date=None,
    )
    assert student.status_on(datetime.date(2023, 8, 15)) == ONGOING
    assert student.status_on(datetime.date(2023, 8, 16)) == COMPLETED

    student.graduation_date = datetime.date(2030, 1, 1)
    assert student.status_on(datetime.date(2023, 8, 16)) == ONGOING


@pytest.mark.django_db
def test_display_status_degrades_to_unknown(make_student):
    student = make_student()
    with mock.patch.object(Student, "status_on", side_effect=RuntimeError("boom")):
        assert display_status(student, datetime.date(2024, 1, 1)) == UNKNOWN


def test_display_status_for_unsaved_record_with_missing_duration():
    student = Student(admission_date=datetime.date(2021, 1, 1), course_duration_months=None)
    assert display_status(student, datetime.date(2024, 1, 1)) == UNKNOWN


@pytest.mark.django_db
def test_status_breakdown(make_student):
    students = [
        make_student(admission_date=datetime.date(2020, 1, 1), course_duration_months=12),
        make_student(admission_date=datetime.date(2023, 9, 1), course_duration_months=36),
        make_student(admission_date=datetime.date(2023, 9, 1), course_duration_months=36),
    ]
    counts = status_breakdown(students, datetime.date(2024, 6, 1))
    assert counts == {COMPLETED: 1, ONGOING: 2, UNKNOWN: 0}


@pytest.mark.django_db
def test_filter_students_matches_full_name_and_enrollment(make_student):
    riya = make_student(enrollment_number="JBPI5001", first_name="Riya", last_name="Kapoor")
    make_student(enrollment_number="JBPI5002", first_name="Kabir", last_name="Mehta", course="MBA")

    by_name = filter_students(Student.objects.all(), query="riya kap")
    assert list(by_name) == [riya]

    by_number = filter_students(Student.objects.all(), query="5001")
    assert list(by_number) == [riya]

    by_course = filter_students(Student.objects.all(), course="MBA")
    assert [s.enrollment_number for s in by_course] == ["JBPI5002"]

    assert filter_students(Student.objects.all(), course="All").count() == 2
