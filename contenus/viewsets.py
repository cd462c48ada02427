# contenus/viewsets.py
import logging

from django.http import Http404
from rest_framework import viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from academic_structure import registry

logger = logging.getLogger(__name__)

CLES_CATEGORIE = ('model', 'type', 'level', 'grade')


class ContenuViewSet(viewsets.ModelViewSet):
    """
    CRUD générique pour une famille de contenus.

    Les sous-classes fixent ``famille`` (clé du registre) ; avec
    ``famille = None`` l'entité est plate et n'a pas de catégorie (livres,
    pages). ``remplacement_complet`` fait d'un PATCH un remplacement complet :
    tous les champs obligatoires doivent alors être fournis.
    """
    famille = None
    libelle = None
    remplacement_complet = False
    lookup_value_regex = r'[0-9]+'

    def get_libelle(self):
        if self.libelle:
            return self.libelle
        if self.famille:
            return registry.FAMILLES[self.famille].libelle
        return self.queryset.model._meta.verbose_name.capitalize()

    def categorie_demandee(self, obligatoire=True):
        """
        Catégorie adressée par la requête (query string puis corps JSON).
        Retourne None si aucune clé n'est fournie et qu'elle est facultative.
        """
        cles = {}
        for cle in CLES_CATEGORIE:
            valeur = self.request.query_params.get(cle)
            if valeur is None and hasattr(self.request.data, 'get'):
                valeur = self.request.data.get(cle)
            if valeur not in (None, ''):
                cles[cle] = str(valeur)
        if not cles and not obligatoire:
            return None
        return registry.resoudre(self.famille, **cles)

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.famille is None or getattr(self, 'swagger_fake_view', False):
            return queryset
        # La liste exige une catégorie ; les routes par id l'acceptent en qualificatif
        categorie = self.categorie_demandee(obligatoire=self.action == 'list')
        if categorie is None:
            return queryset
        return categorie.objets()

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(f"{self.get_libelle()} not found")

    def perform_create(self, serializer):
        if self.famille is None:
            instance = serializer.save()
        else:
            categorie = self.categorie_demandee()
            instance = serializer.save(categorie=categorie.nom)
        logger.info(f"{self.get_libelle()} créé: id={instance.pk} catégorie={getattr(instance, 'categorie', '-')}")

    def perform_update(self, serializer):
        instance = serializer.save()
        logger.info(f"{self.get_libelle()} mis à jour: id={instance.pk}")

    def perform_destroy(self, instance):
        pk = instance.pk
        instance.delete()
        logger.info(f"{self.get_libelle()} supprimé: id={pk}")

    def partial_update(self, request, *args, **kwargs):
        if self.remplacement_complet:
            return self.update(request, *args, **kwargs)
        return super().partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({'message': f"{self.get_libelle()} deleted successfully"})
