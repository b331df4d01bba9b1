from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Certificate(models.Model):
    TYPE_CHOICES = [
        ("completion", "Completion"),
        ("degree", "Degree"),
        ("diploma", "Diploma"),
        ("marksheet", "Marksheet"),
        ("provisional", "Provisional"),
    ]
    GRADE_CHOICES = [(g, g) for g in ("A+", "A", "B+", "B", "C+", "C", "pass")]

    student = models.ForeignKey(
        "students.Student", on_delete=models.CASCADE, related_name="certificates"
    )
    certificate_number = models.CharField(max_length=64, unique=True)
    certificate_type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    issue_date = models.DateField()
    grade = models.CharField(max_length=8, choices=GRADE_CHOICES, blank=True)
    percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    gdrive_link = models.URLField(blank=True)
    remarks = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.certificate_number


class MarksheetLink(models.Model):
    certificate = models.ForeignKey(
        Certificate, on_delete=models.CASCADE, related_name="marksheet_links"
    )
    semester = models.CharField(max_length=64)
    link = models.URLField(blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.semester
