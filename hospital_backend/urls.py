"""Hospital backend URL Configuration.

Routes:
    /                  - Plain-text liveness response
    /admin/            - Hospital admin site
    /reports/          - Daily Report Management screen (reports)
    /api/health/       - Health check (core)
    /api/auth/         - Authentication (core)
    /api/reports/      - Daily report JSON API (reports)
"""

from django.http import HttpResponse
from django.urls import include, path

from hospital_backend.core.admin import hospital_admin_site


def root(request):
    return HttpResponse("Hospital backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", hospital_admin_site.urls),
    path("reports/", include("hospital_backend.reports.urls")),

    path("api/", include("hospital_backend.core.urls")),
    path("api/", include("hospital_backend.reports.api_urls")),
]
