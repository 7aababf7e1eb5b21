"""URL configuration for frpsDashboard."""

from __future__ import annotations

from django.urls import include, path

from dashboard import views as dashboard_views

urlpatterns = [
    path("", include("dashboard.urls")),
    path("healthz", dashboard_views.healthz, name="healthz"),
]
