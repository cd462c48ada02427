from django.apps import AppConfig


class ExamensConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'examens'
    verbose_name = 'Examens et examens blancs'
