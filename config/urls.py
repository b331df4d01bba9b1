from django.contrib import admin
from django.urls import include, path
from accounts import views as accounts_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("django-rq/", include("django_rq.urls")),
    path("accounts/", include("allauth.urls")),
    path("", accounts_views.home, name="home"),
    path("admin-panel/", accounts_views.dashboard, name="dashboard"),
    # public directory and admin management of records
    path("", include("students.urls")),
    path("", include("certificates.urls")),
    # read-only JSON API
    path("api/", include("api.urls")),
]
