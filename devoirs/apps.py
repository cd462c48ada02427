from django.apps import AppConfig


class DevoirsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'devoirs'
    verbose_name = 'Devoirs'
