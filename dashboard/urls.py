"""URL configuration for dashboard views."""

from __future__ import annotations

from django.urls import path

from dashboard import views

app_name = "dashboard"

urlpatterns = [
    path("", views.dashboard, name="index"),
    path("api/serverinfo/", views.server_info_api, name="server_info_api"),
    path("api/charts/", views.charts_api, name="charts_api"),
]
