"""
Pagination utilities for the project.

Defines the default page number pagination class used by the JSON API.
Clients may ask for a smaller or larger page with ``?page_size=``, up to
the size of one directory listing page.
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """A simple page number paginator with a default page size."""
    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = settings.ORGANISATIONS_PER_PAGE
