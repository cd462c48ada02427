# cours/admin.py
from django.contrib import admin
from contenus.admin import formulaire_categorie
from .models import Cours


@admin.register(Cours)
class CoursAdmin(admin.ModelAdmin):
    form = formulaire_categorie(Cours, 'cours')
    list_display = ('nom', 'categorie', 'liens_renseignes', 'date_creation')
    list_filter = ('categorie',)
    search_fields = ('nom',)
    readonly_fields = ('date_creation', 'date_modification')
    ordering = ('-date_creation',)

    fieldsets = (
        ('Informations principales', {
            'fields': ('categorie', 'nom')
        }),
        ('Liens', {
            'fields': ('lien_cours', 'lien_exercices', 'lien_devoir', 'lien_examen')
        }),
        ('Dates', {
            'fields': ('date_creation', 'date_modification'),
            'classes': ('collapse',)
        }),
    )

    def liens_renseignes(self, obj):
        """Nombre de liens renseignés sur les quatre possibles"""
        liens = (obj.lien_cours, obj.lien_exercices, obj.lien_devoir, obj.lien_examen)
        return f"{sum(1 for lien in liens if lien)}/4"
    liens_renseignes.short_description = "Liens"
