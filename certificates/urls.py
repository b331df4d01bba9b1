from django.urls import path
from . import views

app_name = "certificates"

urlpatterns = [
    path("certificates/", views.listing, name="listing"),
    path("admin-panel/certificates/", views.manage, name="manage"),
    path("admin-panel/certificates/add/", views.add_certificate, name="add"),
    path("admin-panel/certificates/<int:pk>/edit/", views.edit_certificate, name="edit"),
    path("admin-panel/certificates/<int:pk>/delete/", views.delete_certificate, name="delete"),
]
