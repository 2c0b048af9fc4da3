"""
Admin configuration for the organisations app.

Defines how organisations and categories are displayed in the Django
admin list view.
"""
from django.contrib import admin

from .models import Category, CategoryOrganisation, Organisation


class CategoryOrganisationInline(admin.TabularInline):
    model = CategoryOrganisation
    extra = 1


@admin.register(Organisation)
class OrganisationAdmin(admin.ModelAdmin):
    list_display = ("name", "postcode", "updated_at")
    search_fields = ("name", "description", "postcode")
    inlines = [CategoryOrganisationInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "charity_commission_id")
    search_fields = ("name",)
