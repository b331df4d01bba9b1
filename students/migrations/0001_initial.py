import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "enrollment_number",
                    models.CharField(
                        max_length=32,
                        unique=True,
                        validators=[
                            django.core.validators.MinLengthValidator(5, "Enrollment number is required."),
                            django.core.validators.RegexValidator(
                                "^[A-Z0-9]+$",
                                "Enrollment number should be alphanumeric (uppercase letters and numbers).",
                            ),
                        ],
                    ),
                ),
                ("first_name", models.CharField(max_length=64)),
                ("last_name", models.CharField(blank=True, max_length=64)),
                ("father_name", models.CharField(blank=True, max_length=128)),
                ("mother_name", models.CharField(blank=True, max_length=128)),
                ("date_of_birth", models.DateField(blank=True, null=True)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[("male", "Male"), ("female", "Female"), ("other", "Other")],
                        max_length=8,
                    ),
                ),
                (
                    "blood_group",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("A+", "A+"), ("A-", "A-"), ("B+", "B+"), ("B-", "B-"),
                            ("AB+", "AB+"), ("AB-", "AB-"), ("O+", "O+"), ("O-", "O-"),
                        ],
                        max_length=4,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("general", "General"), ("obc", "OBC"), ("sc", "SC"),
                            ("st", "ST"), ("ews", "EWS"),
                        ],
                        max_length=8,
                    ),
                ),
                ("phone", models.CharField(max_length=20)),
                ("alternate_phone", models.CharField(blank=True, max_length=20)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("emergency_contact", models.CharField(blank=True, max_length=64)),
                (
                    "aadhar_number",
                    models.CharField(
                        blank=True,
                        max_length=12,
                        validators=[django.core.validators.RegexValidator("^\\d{12}$", "Aadhar number must be 12 digits.")],
                    ),
                ),
                ("address", models.TextField(blank=True)),
                ("city", models.CharField(blank=True, max_length=64)),
                ("state", models.CharField(blank=True, max_length=64)),
                (
                    "pincode",
                    models.CharField(
                        blank=True,
                        max_length=6,
                        validators=[django.core.validators.RegexValidator("^\\d{6}$", "Pincode must be 6 digits.")],
                    ),
                ),
                ("course", models.CharField(max_length=128)),
                (
                    "program_type",
                    models.CharField(
                        choices=[("Degree", "Degree"), ("Certificate", "Certificate")],
                        max_length=16,
                    ),
                ),
                (
                    "batch",
                    models.CharField(
                        max_length=32,
                        validators=[
                            django.core.validators.MinLengthValidator(
                                4, "Batch year is required (e.g., 2023-2025 or 2023)."
                            )
                        ],
                    ),
                ),
                ("admission_date", models.DateField()),
                (
                    "course_duration_months",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1, "Course duration must be a positive number.")]
                    ),
                ),
                ("graduation_date", models.DateField(blank=True, null=True)),
                (
                    "total_fees",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0, "Total fees cannot be negative.")],
                    ),
                ),
                (
                    "fees_submitted",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0, "Fees submitted cannot be negative.")],
                    ),
                ),
                ("remarks", models.TextField(blank=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("Active", "Active"), ("Completed", "Completed"), ("Inactive", "Inactive")],
                        default="Active",
                        max_length=16,
                    ),
                ),
                (
                    "certificate_status",
                    models.CharField(
                        choices=[("Pending", "Pending"), ("Issued", "Issued")],
                        default="Pending",
                        max_length=16,
                    ),
                ),
                ("profile_picture_url", models.URLField(blank=True)),
                ("program_certificate_link", models.URLField(blank=True)),
                ("degree_certificate_link", models.URLField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="SemesterLink",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("semester", models.CharField(max_length=64)),
                ("link", models.URLField(blank=True)),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="semester_links",
                        to="students.student",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
