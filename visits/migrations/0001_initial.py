from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="VisitRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=200)),
                ("phone", models.CharField(max_length=20)),
                ("city", models.CharField(max_length=100)),
                ("district", models.CharField(max_length=100)),
                ("address", models.TextField()),
                (
                    "material_type",
                    models.CharField(
                        choices=[("ألمنيوم", "ألمنيوم"), ("خشب", "خشب"), ("صاج", "صاج"), ("فورميكا", "فورميكا")],
                        max_length=20,
                    ),
                ),
                ("approx_meters", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("preferred_datetime", models.CharField(blank=True, max_length=50, null=True)),
                ("notes", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("new", "new"),
                            ("contacted", "contacted"),
                            ("scheduled", "scheduled"),
                            ("done", "done"),
                            ("cancelled", "cancelled"),
                        ],
                        default="new",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "visit_requests",
                "ordering": ("-created_at", "-id"),
            },
        ),
    ]
