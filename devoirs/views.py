# devoirs/views.py
from contenus.viewsets import ContenuViewSet
from devoirs.filters import DevoirFilter
from devoirs.models import Devoir
from devoirs.serializers import DevoirSerializer


class DevoirViewSet(ContenuViewSet):
    """
    ViewSet pour les devoirs. Le PATCH remplace le devoir : titre, contenu et
    semestre sont obligatoires, le PDF n'est modifié que s'il est envoyé.
    """
    famille = 'devoirs'
    remplacement_complet = True
    queryset = Devoir.objects.all()
    serializer_class = DevoirSerializer
    filterset_class = DevoirFilter
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
