from django.apps import AppConfig


class ContenusConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contenus'
    verbose_name = 'Contenus (socle commun)'
