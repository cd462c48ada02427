# cours/views.py
from rest_framework.decorators import action
from rest_framework.response import Response

from academic_structure import registry
from contenus.viewsets import ContenuViewSet
from cours.models import Cours
from cours.serializers import CoursSerializer


class CoursViewSet(ContenuViewSet):
    """
    ViewSet pour les cours. La mise à jour est un PATCH partiel : seuls les
    champs envoyés (nom, liens) sont modifiés.
    """
    famille = 'cours'
    queryset = Cours.objects.all()
    serializer_class = CoursSerializer
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    @action(detail=False, methods=['get'], url_path='all')
    def tous(self, request):
        """Tous les cours, toutes catégories confondues, filtrables par level / grade"""
        categories = registry.filtrer(
            self.famille,
            level=request.query_params.get('level'),
            grade=request.query_params.get('grade'),
        )
        cours = Cours.objects.filter(categorie__in=[c.nom for c in categories])
        serializer = self.get_serializer(cours, many=True)
        return Response(serializer.data)
