from django.urls import path

from . import views

app_name = "spectrum_search"

urlpatterns = [
    path("", views.advanced_search, name="advanced_search"),
    path("results/", views.results, name="results"),
    path("settings/", views.engine_settings, name="engine_settings"),
]
