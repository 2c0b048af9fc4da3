"""
Read-only JSON API for the directory.

Lists and retrieves organisations and categories, and serves the map
markers for a search as a JSON array.  Anyone may read; all writes go
through the HTML views and their permission checks.
"""
from rest_framework import permissions, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .markers import map_markers
from .models import Category, Organisation
from .serializers import CategorySerializer, OrganisationSerializer


class OrganisationViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = OrganisationSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        params = self.request.query_params
        return (
            Organisation.objects.order_by_most_recent()
            .search_by_keyword(params.get("q"))
            .filter_by_category(params.get("category_id"))
            .prefetch_related("categories")
        )

    # GET /api/organisations/markers/?q=...&category_id=...
    @action(detail=False, methods=["get"], url_path="markers", pagination_class=None)
    def markers(self, request):
        return Response(map_markers(self.get_queryset()))


class CategoryViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = CategorySerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None
    queryset = Category.objects.all()
