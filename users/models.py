"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the
organisation the user administers and any pending request to become an
administrator of another one.  A `OneToOneField` links each profile to
its user.  The `UserProfile` is created automatically via signals when a
new user instance is saved.
"""
from django.contrib.auth.models import User
from django.db import models


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    organisation = models.ForeignKey(
        "organisations.Organisation",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="admins",
        help_text="Organisation this user administers",
    )
    pending_organisation = models.ForeignKey(
        "organisations.Organisation",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pending_admins",
        help_text="Organisation this user has asked to administer",
    )

    def __str__(self) -> str:
        return f"Profile<{self.user.username}>"

    class Meta:
        indexes = [
            models.Index(fields=["organisation"], name="users_userp_organis_6c1f2a_idx"),
            models.Index(fields=["pending_organisation"], name="users_userp_pending_9b3e4d_idx"),
        ]
