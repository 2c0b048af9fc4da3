"""
Initial migration for the users app.

Defines the `UserProfile` model linking each user to the organisation
they administer and to any organisation they have asked to administer.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("organisations", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
                ("organisation", models.ForeignKey(blank=True, help_text="Organisation this user administers", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="admins", to="organisations.organisation")),
                ("pending_organisation", models.ForeignKey(blank=True, help_text="Organisation this user has asked to administer", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="pending_admins", to="organisations.organisation")),
            ],
            options={
                "indexes": [
                    models.Index(fields=["organisation"], name="users_userp_organis_6c1f2a_idx"),
                    models.Index(fields=["pending_organisation"], name="users_userp_pending_9b3e4d_idx"),
                ],
            },
        ),
    ]
