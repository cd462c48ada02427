# devoirs/models.py
from django.db import models
from contenus.models import ContenuBase


class Devoir(ContenuBase):
    """Devoir d'une catégorie pour un semestre donné"""
    SEMESTRES = [
        (1, 'Semestre 1'),
        (2, 'Semestre 2'),
    ]

    titre = models.CharField(max_length=200)
    contenu = models.TextField()
    url_pdf = models.CharField(max_length=500, blank=True, null=True)
    semestre = models.PositiveSmallIntegerField(choices=SEMESTRES)

    class Meta(ContenuBase.Meta):
        verbose_name = "Devoir"
        verbose_name_plural = "Devoirs"
        indexes = [models.Index(fields=['categorie', 'semestre'], name='devoir_categorie_semestre_idx')]

    def __str__(self):
        return f"{self.titre} - S{self.semestre} ({self.categorie})"
