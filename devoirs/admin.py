# devoirs/admin.py
from django.contrib import admin
from contenus.admin import formulaire_categorie
from .models import Devoir


@admin.register(Devoir)
class DevoirAdmin(admin.ModelAdmin):
    form = formulaire_categorie(Devoir, 'devoirs')
    list_display = ('titre', 'categorie', 'semestre', 'has_pdf', 'date_creation')
    list_filter = ('categorie', 'semestre')
    search_fields = ('titre', 'contenu')
    readonly_fields = ('date_creation', 'date_modification')
    ordering = ('-date_creation',)

    def has_pdf(self, obj):
        return bool(obj.url_pdf)
    has_pdf.boolean = True
    has_pdf.short_description = 'PDF'
