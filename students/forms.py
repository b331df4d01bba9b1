from django import forms
from django.forms import inlineformset_factory
from .courses import COURSE_CHOICES
from .models import SemesterLink, Student

DATE_INPUT = forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d")


class StudentForm(forms.ModelForm):
    course = forms.ChoiceField(choices=COURSE_CHOICES)

    class Meta:
        model = Student
        fields = [
            "enrollment_number",
            "first_name",
            "last_name",
            "father_name",
            "mother_name",
            "date_of_birth",
            "gender",
            "blood_group",
            "category",
            "phone",
            "alternate_phone",
            "email",
            "emergency_contact",
            "aadhar_number",
            "address",
            "city",
            "state",
            "pincode",
            "course",
            "program_type",
            "batch",
            "admission_date",
            "course_duration_months",
            "graduation_date",
            "total_fees",
            "fees_submitted",
            "remarks",
            "status",
            "certificate_status",
            "profile_picture_url",
            "program_certificate_link",
            "degree_certificate_link",
        ]
        labels = {"admission_date": "Enrollment date"}
        widgets = {
            "date_of_birth": DATE_INPUT,
            "admission_date": DATE_INPUT,
            "graduation_date": DATE_INPUT,
            "address": forms.Textarea(attrs={"rows": 2}),
            "remarks": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # keep legacy courses that have since left the catalogue selectable
        current = self.instance.course if self.instance.pk else None
        if current and (current, current) not in COURSE_CHOICES:
            self.fields["course"].choices = [(current, current)] + COURSE_CHOICES

    def clean_enrollment_number(self):
        return (self.cleaned_data.get("enrollment_number") or "").strip()


SemesterLinkFormSet = inlineformset_factory(
    Student,
    SemesterLink,
    fields=["semester", "link"],
    extra=1,
    can_delete=True,
)
