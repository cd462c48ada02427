# bibliotheque/models.py
from django.db import models
from contenus.models import Horodatage


class Livre(Horodatage):
    """Livre de la bibliothèque (entité plate, sans catégorie)"""
    titre = models.CharField(max_length=200)
    contenu = models.TextField()
    image = models.CharField(max_length=500, blank=True, null=True)
    description = models.TextField(blank=True, default='')
    auteur = models.CharField(max_length=200, blank=True, default='')
    actif = models.BooleanField(default=True)

    class Meta(Horodatage.Meta):
        verbose_name = "Livre"
        verbose_name_plural = "Livres"

    def __str__(self):
        return self.titre
