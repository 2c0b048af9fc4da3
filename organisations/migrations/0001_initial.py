"""
Initial migration for the organisations app.

Creates the Category and Organisation models and the
CategoryOrganisation through table that links them.
"""
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("charity_commission_id", models.IntegerField(blank=True, null=True)),
                ("charity_commission_name", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "categories",
            },
        ),
        migrations.CreateModel(
            name="Organisation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("postcode", models.CharField(blank=True, max_length=20)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("website", models.CharField(blank=True, max_length=255)),
                ("telephone", models.CharField(blank=True, max_length=50)),
                ("donation_info", models.CharField(blank=True, max_length=255)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                ("publish_address", models.BooleanField(default=False)),
                ("publish_phone", models.BooleanField(default=False)),
                ("publish_email", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="CategoryOrganisation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="organisations.category")),
                ("organisation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="organisations.organisation")),
            ],
            options={
                "unique_together": {("category", "organisation")},
            },
        ),
        migrations.AddField(
            model_name="organisation",
            name="categories",
            field=models.ManyToManyField(blank=True, related_name="organisations", through="organisations.CategoryOrganisation", to="organisations.category"),
        ),
        migrations.AddIndex(
            model_name="organisation",
            index=models.Index(fields=["updated_at"], name="organisatio_updated_3f9c1e_idx"),
        ),
        migrations.AddIndex(
            model_name="organisation",
            index=models.Index(fields=["name"], name="organisatio_name_8a2d4b_idx"),
        ),
    ]
