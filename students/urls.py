from django.urls import path
from . import views

app_name = "students"

urlpatterns = [
    path("students/", views.directory, name="directory"),
    path("admin-panel/students/", views.manage, name="manage"),
    path("admin-panel/students/add/", views.add_student, name="add"),
    path("admin-panel/students/<int:pk>/edit/", views.edit_student, name="edit"),
    path("admin-panel/students/<int:pk>/delete/", views.delete_student, name="delete"),
]
