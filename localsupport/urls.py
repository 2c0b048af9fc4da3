"""
URL configuration for the LocalSupport directory.

HTML pages for the directory live under `/organisations/`; sign-in and
sign-out use Django's auth views under `/users/`.  The read-only JSON
API is registered under the `/api/` prefix via DRF's router.
"""

from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from localsupport.views import index
from organisations.api import CategoryViewSet, OrganisationViewSet


router = DefaultRouter()
router.register(r"organisations", OrganisationViewSet, basename="organisation")
router.register(r"categories", CategoryViewSet, basename="category")

urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    path("organisations/", include("organisations.urls")),

    # Auth endpoints
    path("users/sign_in/", auth_views.LoginView.as_view(), name="login"),
    path("users/sign_out/", auth_views.LogoutView.as_view(), name="logout"),

    #  Swagger
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("api/", include(router.urls)),
]
