import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Spectrum",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("ac_program", models.CharField(blank=True, max_length=100)),
                ("ac_section", models.CharField(blank=True, max_length=100)),
                ("fat_mission", models.CharField(blank=True, max_length=100)),
                ("fat_mission_issue", models.CharField(blank=True, max_length=20)),
                ("flp_issue", models.CharField(blank=True, max_length=20)),
                ("iflp_issue", models.CharField(blank=True, max_length=20)),
                ("cdf_issue", models.CharField(blank=True, max_length=20)),
                ("delivery_ref", models.CharField(blank=True, max_length=100)),
                ("description", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "spectra",
            },
        ),
        migrations.CreateModel(
            name="SearchCache",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=64, unique=True)),
                ("search_json", models.JSONField()),
                ("results_json", models.JSONField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
        ),
    ]
