"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.content_type_generator, name="home"),
    path("content-types/", views.content_type_generator, name="content_type_generator"),
    path("api/content-types/", views.content_types_api, name="content_types_api"),
]
