"""Client URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.clients.views import ClientDetailView

urlpatterns = [
    path(
        "clients/<str:document_type>/<str:document_number>",
        ClientDetailView.as_view(),
        name="client-detail",
    ),
]
