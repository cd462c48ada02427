from django.apps import AppConfig


class CoursConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cours'
    verbose_name = 'Cours'
