# examens/admin.py
from django.contrib import admin
from contenus.admin import formulaire_categorie
from .models import Examen, ExamenBlanc


@admin.register(Examen)
class ExamenAdmin(admin.ModelAdmin):
    form = formulaire_categorie(Examen, 'examens')
    list_display = ('titre', 'categorie', 'annee', 'has_solution', 'date_creation')
    list_filter = ('categorie', 'annee')
    search_fields = ('titre', 'contenu')
    readonly_fields = ('date_creation', 'date_modification')
    ordering = ('-annee', '-date_creation')

    fieldsets = (
        ('Informations générales', {
            'fields': ('categorie', 'titre', 'annee', 'contenu')
        }),
        ('Fichiers', {
            'fields': ('url_pdf', 'url_solution')
        }),
        ('Dates', {
            'fields': ('date_creation', 'date_modification'),
            'classes': ('collapse',)
        }),
    )

    def has_solution(self, obj):
        return bool(obj.url_solution)
    has_solution.boolean = True
    has_solution.short_description = 'Corrigé'


@admin.register(ExamenBlanc)
class ExamenBlancAdmin(admin.ModelAdmin):
    form = formulaire_categorie(ExamenBlanc, 'examens_blancs')
    list_display = ('titre', 'categorie', 'date_creation')
    list_filter = ('categorie',)
    search_fields = ('titre', 'contenu')
    readonly_fields = ('date_creation', 'date_modification')
    ordering = ('-date_creation',)
