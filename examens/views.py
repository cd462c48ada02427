# examens/views.py
from contenus.viewsets import ContenuViewSet
from examens.filters import ExamenFilter
from examens.models import Examen, ExamenBlanc
from examens.serializers import ExamenSerializer, ExamenBlancSerializer


class ExamenViewSet(ContenuViewSet):
    """
    ViewSet pour les examens, filtrables par année. Le PATCH remplace
    l'examen ; le corrigé n'est modifié que s'il est envoyé.
    """
    famille = 'examens'
    remplacement_complet = True
    queryset = Examen.objects.all()
    serializer_class = ExamenSerializer
    filterset_class = ExamenFilter
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']


class ExamenBlancViewSet(ContenuViewSet):
    """
    ViewSet pour les examens blancs (mêmes règles que les examens, sans année)
    """
    famille = 'examens_blancs'
    remplacement_complet = True
    queryset = ExamenBlanc.objects.all()
    serializer_class = ExamenBlancSerializer
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
