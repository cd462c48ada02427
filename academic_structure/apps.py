from django.apps import AppConfig


class AcademicStructureConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'academic_structure'
    verbose_name = 'Structure académique'
