# contenus/models.py
from django.db import models


class Horodatage(models.Model):
    """Dates de création / modification gérées par le serveur"""
    date_creation = models.DateTimeField(auto_now_add=True)
    date_modification = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['-date_creation', '-id']


class ContenuBase(Horodatage):
    """
    Enregistrement de contenu rattaché à une catégorie du registre
    (academic_structure.registry). La catégorie est fixée à la création
    et ne change plus ensuite.
    """
    categorie = models.CharField(max_length=80, db_index=True)

    class Meta(Horodatage.Meta):
        abstract = True

    @property
    def categorie_registre(self):
        from academic_structure.registry import categorie_par_nom
        return categorie_par_nom(self.categorie)
