# academic_structure/views.py
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from academic_structure import registry
from academic_structure.serializers import CategorieSerializer, NiveauSerializer
from contenus.exceptions import CategorieInvalide


class CategorieViewSet(viewsets.ViewSet):
    """
    ViewSet pour le registre des catégories (lecture seule)
    """
    serializer_class = CategorieSerializer

    def list(self, request):
        """Lister les catégories, éventuellement d'une seule famille"""
        famille = request.query_params.get('family')
        if famille and famille not in registry.FAMILLES:
            raise CategorieInvalide('Invalid family specified')
        serializer = CategorieSerializer(registry.categories(famille), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'], serializer_class=NiveauSerializer)
    def niveaux(self, request):
        """Niveaux et classes autorisées pour chacun"""
        donnees = [
            {'level': niveau, 'grades': list(classes)}
            for niveau, classes in registry.niveaux().items()
        ]
        return Response(NiveauSerializer(donnees, many=True).data)
