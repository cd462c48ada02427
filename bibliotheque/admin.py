# bibliotheque/admin.py
from django.contrib import admin
from .models import Livre


def activer_livres(modeladmin, request, queryset):
    queryset.update(actif=True)
activer_livres.short_description = "Activer les livres sélectionnés"


def desactiver_livres(modeladmin, request, queryset):
    queryset.update(actif=False)
desactiver_livres.short_description = "Désactiver les livres sélectionnés"


@admin.register(Livre)
class LivreAdmin(admin.ModelAdmin):
    list_display = ('titre', 'auteur', 'actif', 'date_creation')
    list_filter = ('actif',)
    list_editable = ('actif',)
    search_fields = ('titre', 'auteur', 'description')
    readonly_fields = ('date_creation', 'date_modification')
    actions = [activer_livres, desactiver_livres]
