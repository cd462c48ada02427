# pages/models.py
from django.db import models
from contenus.models import Horodatage


class DescriptionPage(Horodatage):
    """Texte SEO / métadonnées d'une route du site"""
    chemin_page = models.CharField(max_length=255, unique=True)
    titre = models.CharField(max_length=200)
    description = models.TextField()
    description_courte = models.CharField(max_length=300, blank=True, default='')
    actif = models.BooleanField(default=True)

    class Meta(Horodatage.Meta):
        verbose_name = "Description de page"
        verbose_name_plural = "Descriptions de pages"

    def __str__(self):
        return f"{self.chemin_page} - {self.titre}"
