# organisations routes
from django.urls import path

from . import views

app_name = "organisations"

urlpatterns = [
    path("", views.collection, name="index"),
    path("search/", views.search, name="search"),
    path("new/", views.new, name="new"),
    path("<int:pk>/", views.member, name="show"),
    path("<int:pk>/edit/", views.edit, name="edit"),
    path("<int:pk>/delete/", views.destroy, name="destroy"),
    path("<int:pk>/grab/", views.grab, name="grab"),
]
