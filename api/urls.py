from django.urls import include, path
from rest_framework.routers import DefaultRouter
from . import views

app_name = "api"

router = DefaultRouter()
router.register("students", views.StudentViewSet, basename="student")
router.register("certificates", views.CertificateViewSet, basename="certificate")

urlpatterns = [
    path("status/", views.StatusView.as_view(), name="status"),
    path("", include(router.urls)),
]
