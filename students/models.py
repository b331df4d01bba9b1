from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models

from .status import resolve_status

enrollment_number_validator = RegexValidator(
    r"^[A-Z0-9]+$",
    "Enrollment number should be alphanumeric (uppercase letters and numbers).",
)
aadhar_validator = RegexValidator(r"^\d{12}$", "Aadhar number must be 12 digits.")
pincode_validator = RegexValidator(r"^\d{6}$", "Pincode must be 6 digits.")


class Student(models.Model):
    PROGRAM_CHOICES = [("Degree", "Degree"), ("Certificate", "Certificate")]
    STATUS_CHOICES = [
        ("Active", "Active"),
        ("Completed", "Completed"),
        ("Inactive", "Inactive"),
    ]
    CERTIFICATE_STATUS_CHOICES = [("Pending", "Pending"), ("Issued", "Issued")]
    GENDER_CHOICES = [("male", "Male"), ("female", "Female"), ("other", "Other")]
    BLOOD_GROUP_CHOICES = [
        (g, g) for g in ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
    ]
    CATEGORY_CHOICES = [
        ("general", "General"),
        ("obc", "OBC"),
        ("sc", "SC"),
        ("st", "ST"),
        ("ews", "EWS"),
    ]

    # basic information
    enrollment_number = models.CharField(
        max_length=32,
        unique=True,
        validators=[
            MinLengthValidator(5, "Enrollment number is required."),
            enrollment_number_validator,
        ],
    )
    first_name = models.CharField(max_length=64)
    last_name = models.CharField(max_length=64, blank=True)
    father_name = models.CharField(max_length=128, blank=True)
    mother_name = models.CharField(max_length=128, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=8, choices=GENDER_CHOICES, blank=True)
    blood_group = models.CharField(max_length=4, choices=BLOOD_GROUP_CHOICES, blank=True)
    category = models.CharField(max_length=8, choices=CATEGORY_CHOICES, blank=True)

    # contact
    phone = models.CharField(max_length=20)
    alternate_phone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    emergency_contact = models.CharField(max_length=64, blank=True)
    aadhar_number = models.CharField(max_length=12, blank=True, validators=[aadhar_validator])

    # address
    address = models.TextField(blank=True)
    city = models.CharField(max_length=64, blank=True)
    state = models.CharField(max_length=64, blank=True)
    pincode = models.CharField(max_length=6, blank=True, validators=[pincode_validator])

    # academic
    course = models.CharField(max_length=128)
    program_type = models.CharField(max_length=16, choices=PROGRAM_CHOICES)
    batch = models.CharField(
        max_length=32,
        validators=[MinLengthValidator(4, "Batch year is required (e.g., 2023-2025 or 2023).")],
    )
    admission_date = models.DateField()
    course_duration_months = models.PositiveIntegerField(
        validators=[MinValueValidator(1, "Course duration must be a positive number.")]
    )
    graduation_date = models.DateField(null=True, blank=True)

    # fees
    total_fees = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(0, "Total fees cannot be negative.")],
    )
    fees_submitted = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(0, "Fees submitted cannot be negative.")],
    )

    remarks = models.TextField(blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="Active")
    certificate_status = models.CharField(
        max_length=16, choices=CERTIFICATE_STATUS_CHOICES, default="Pending"
    )

    profile_picture_url = models.URLField(blank=True)
    program_certificate_link = models.URLField(blank=True)
    degree_certificate_link = models.URLField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.full_name} ({self.enrollment_number})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def clean(self):
        if (
            self.total_fees is not None
            and self.fees_submitted is not None
            and self.fees_submitted > self.total_fees
        ):
            raise ValidationError(
                {"fees_submitted": "Fees submitted cannot exceed total fees."}
            )

    def status_on(self, current_date):
        return resolve_status(
            self.admission_date,
            self.course_duration_months,
            self.graduation_date,
            current_date,
        )


class SemesterLink(models.Model):
    student = models.ForeignKey(
        Student, on_delete=models.CASCADE, related_name="semester_links"
    )
    semester = models.CharField(max_length=64)
    link = models.URLField(blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.semester
