from django.apps import AppConfig


class TeleversementConfig(AppConfig):
    name = 'televersement'
    verbose_name = 'Téléversement de médias'
