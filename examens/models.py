# examens/models.py
from django.db import models
from contenus.models import ContenuBase


class SujetBase(ContenuBase):
    """Sujet d'examen : énoncé PDF, contenu HTML et corrigé facultatif"""
    titre = models.CharField(max_length=200)
    url_pdf = models.CharField(max_length=500)
    contenu = models.TextField()
    url_solution = models.CharField(max_length=500, blank=True, null=True)

    class Meta(ContenuBase.Meta):
        abstract = True


class Examen(SujetBase):
    """Archive des examens nationaux par année"""
    annee = models.PositiveIntegerField()

    class Meta(SujetBase.Meta):
        verbose_name = "Examen"
        verbose_name_plural = "Examens"

    def __str__(self):
        return f"{self.titre} {self.annee} ({self.categorie})"


class ExamenBlanc(SujetBase):
    """Examen blanc (entraînement), distinct des examens officiels"""

    class Meta(SujetBase.Meta):
        verbose_name = "Examen blanc"
        verbose_name_plural = "Examens blancs"

    def __str__(self):
        return f"{self.titre} ({self.categorie})"
