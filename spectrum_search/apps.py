from django.apps import AppConfig


class SpectrumSearchConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'spectrum_search'
    verbose_name = 'Spectrum search'
