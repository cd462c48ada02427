# pages/admin.py
from django.contrib import admin
from .models import DescriptionPage


@admin.register(DescriptionPage)
class DescriptionPageAdmin(admin.ModelAdmin):
    list_display = ('chemin_page', 'titre', 'actif', 'date_modification')
    list_filter = ('actif',)
    list_editable = ('actif',)
    search_fields = ('chemin_page', 'titre', 'description')
    readonly_fields = ('date_creation', 'date_modification')
    ordering = ('chemin_page',)
