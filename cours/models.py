# cours/models.py
from django.db import models
from contenus.models import ContenuBase


class Cours(ContenuBase):
    """Cours d'une catégorie : un nom et des liens vers les ressources associées"""
    nom = models.CharField(max_length=60)
    lien_cours = models.CharField(max_length=500, blank=True, null=True)
    lien_exercices = models.CharField(max_length=500, blank=True, null=True)
    lien_devoir = models.CharField(max_length=500, blank=True, null=True)
    lien_examen = models.CharField(max_length=500, blank=True, null=True)

    class Meta(ContenuBase.Meta):
        verbose_name = "Cours"
        verbose_name_plural = "Cours"

    def __str__(self):
        return f"{self.nom} ({self.categorie})"
