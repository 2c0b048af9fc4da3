# organisations/models.py
"""
Models for the organisations app.

An `Organisation` is a charity or community group listed in the
directory.  Organisations are tagged with `Category` rows through
`CategoryOrganisation`.  Keyword search, category filtering and ordering
live on `OrganisationQuerySet` so views can chain them.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from django.contrib.auth import get_user_model
from django.db import models, transaction
from django.db.models import Q
from django.urls import reverse

logger = logging.getLogger(__name__)

# Charity Commission ids from this value up are "who"/"how" groupings,
# not "what" categories, and stay out of the search drop-down.
DROP_DOWN_MAX_CHARITY_COMMISSION_ID = 199


def _is_id(value) -> bool:
    return str(value).isdigit()


class CategoryManager(models.Manager):
    def html_drop_down_options(self):
        """(label, id) pairs for the category filter drop-down."""
        qs = self.filter(
            Q(charity_commission_id__lt=DROP_DOWN_MAX_CHARITY_COMMISSION_ID)
            | Q(charity_commission_id__isnull=True)
        ).order_by("name")
        return [(c.name, c.id) for c in qs]

    def find_by_id(self, category_id):
        if category_id is None or not _is_id(category_id):
            return None
        return self.filter(pk=category_id).first()


class Category(models.Model):
    name = models.CharField(max_length=255)
    charity_commission_id = models.IntegerField(null=True, blank=True)
    charity_commission_name = models.CharField(max_length=255, blank=True)

    objects = CategoryManager()

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class OrganisationQuerySet(models.QuerySet):
    def order_by_most_recent(self):
        return self.order_by("-updated_at", "-id")

    def search_by_keyword(self, keyword):
        if keyword is None or not str(keyword).strip():
            return self
        keyword = str(keyword).strip()
        return self.filter(Q(name__icontains=keyword) | Q(description__icontains=keyword))

    def filter_by_category(self, category_id):
        # None and "" both mean "any category"
        if category_id is None or category_id == "":
            return self
        if not _is_id(category_id):
            return self.none()
        return self.filter(categories__id=category_id).distinct()


class Organisation(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    address = models.CharField(max_length=255, blank=True)
    postcode = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    website = models.CharField(max_length=255, blank=True)
    telephone = models.CharField(max_length=50, blank=True)
    donation_info = models.CharField(max_length=255, blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    publish_address = models.BooleanField(default=False)
    publish_phone = models.BooleanField(default=False)
    publish_email = models.BooleanField(default=True)
    categories = models.ManyToManyField(
        Category,
        through="CategoryOrganisation",
        related_name="organisations",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OrganisationQuerySet.as_manager()

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["updated_at"], name="organisatio_updated_3f9c1e_idx"),
            models.Index(fields=["name"], name="organisatio_name_8a2d4b_idx"),
        ]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("organisations:show", args=[self.pk])

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def update_with_admin(self, update: "OrganisationUpdate") -> bool:
        """
        Apply an attribute update and, optionally, promote a user to
        administrator of this organisation.

        Returns False without saving anything when ``admin_email_to_add``
        names no known user; the message is left on ``admin_errors``.
        """
        self.admin_errors = []
        new_admin = None
        if update.admin_email_to_add:
            User = get_user_model()
            new_admin = User.objects.filter(email__iexact=update.admin_email_to_add).first()
            if new_admin is None:
                logger.warning("No user with e-mail %s to add as admin of organisation %s",
                               update.admin_email_to_add, self.pk)
                self.admin_errors.append(
                    f"The user email you entered,'{update.admin_email_to_add}', does not exist in the system"
                )
                return False

        attributes = dict(update.attributes)
        categories = attributes.pop("categories", None)
        with transaction.atomic():
            for attr, value in attributes.items():
                setattr(self, attr, value)
            self.save()
            if categories is not None:
                self.categories.set(categories)
            if new_admin is not None:
                profile = new_admin.profile
                profile.organisation = self
                if profile.pending_organisation_id == self.pk:
                    profile.pending_organisation = None
                profile.save(update_fields=["organisation", "pending_organisation"])
                logger.info("User %s is now an admin of organisation %s", new_admin.pk, self.pk)
        return True


class CategoryOrganisation(models.Model):
    category = models.ForeignKey(Category, on_delete=models.CASCADE)
    organisation = models.ForeignKey(Organisation, on_delete=models.CASCADE)

    class Meta:
        unique_together = ("category", "organisation")

    def __str__(self):
        return f"{self.organisation} → {self.category}"


@dataclass
class OrganisationUpdate:
    """Ordinary organisation fields plus an optional admin to add."""
    attributes: Dict[str, Any] = field(default_factory=dict)
    admin_email_to_add: Optional[str] = None
