import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Certificate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("certificate_number", models.CharField(max_length=64, unique=True)),
                (
                    "certificate_type",
                    models.CharField(
                        choices=[
                            ("completion", "Completion"),
                            ("degree", "Degree"),
                            ("diploma", "Diploma"),
                            ("marksheet", "Marksheet"),
                            ("provisional", "Provisional"),
                        ],
                        max_length=16,
                    ),
                ),
                ("issue_date", models.DateField()),
                (
                    "grade",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("A+", "A+"), ("A", "A"), ("B+", "B+"), ("B", "B"),
                            ("C+", "C+"), ("C", "C"), ("pass", "pass"),
                        ],
                        max_length=8,
                    ),
                ),
                (
                    "percentage",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=5,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                ("gdrive_link", models.URLField(blank=True)),
                ("remarks", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="certificates",
                        to="students.student",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="MarksheetLink",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("semester", models.CharField(max_length=64)),
                ("link", models.URLField(blank=True)),
                (
                    "certificate",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="marksheet_links",
                        to="certificates.certificate",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
