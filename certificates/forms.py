from django import forms
from django.core.exceptions import ValidationError
from django.db.models import Q
from django.forms import BaseInlineFormSet, inlineformset_factory
from students.models import Student
from .models import Certificate, MarksheetLink
from .services import eligible_students, generate_certificate_number


class CertificateForm(forms.ModelForm):
    certificate_number = forms.CharField(
        max_length=64,
        required=False,
        help_text="Leave blank to generate one from the enrollment number.",
    )

    class Meta:
        model = Certificate
        fields = [
            "student",
            "certificate_number",
            "certificate_type",
            "issue_date",
            "grade",
            "percentage",
            "gdrive_link",
            "remarks",
        ]
        labels = {"gdrive_link": "Google Drive link"}
        widgets = {
            "issue_date": forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d"),
            "remarks": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, student_query="", **kwargs):
        super().__init__(*args, **kwargs)
        qs = eligible_students(student_query)
        if self.instance.pk:
            # the current holder stays selectable even if no longer eligible
            qs = Student.objects.filter(
                Q(pk__in=qs.values("pk")) | Q(pk=self.instance.student_id)
            ).order_by("first_name", "last_name", "id")
        self.fields["student"].queryset = qs

    def clean_certificate_number(self):
        return (self.cleaned_data.get("certificate_number") or "").strip()

    def clean(self):
        cleaned = super().clean()
        student = cleaned.get("student")
        if student and not cleaned.get("certificate_number"):
            cleaned["certificate_number"] = generate_certificate_number(student)
        return cleaned


class BaseMarksheetLinkFormSet(BaseInlineFormSet):
    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.instance.student_id:
            return
        program_type = (
            Student.objects.filter(pk=self.instance.student_id)
            .values_list("program_type", flat=True)
            .first()
        )
        if program_type == "Degree":
            return
        for form in self.forms:
            if self._should_delete_form(form):
                continue
            # saved rows count too: the certificate may have changed holder
            if form.instance.pk is None and not form.has_changed():
                continue
            raise ValidationError(
                "Marksheet links can only be added for Degree programs."
            )


MarksheetLinkFormSet = inlineformset_factory(
    Certificate,
    MarksheetLink,
    formset=BaseMarksheetLinkFormSet,
    fields=["semester", "link"],
    extra=1,
    can_delete=True,
)
