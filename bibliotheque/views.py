# bibliotheque/views.py
from contenus.viewsets import ContenuViewSet
from bibliotheque.filters import LivreFilter
from bibliotheque.models import Livre
from bibliotheque.serializers import LivreSerializer


class LivreViewSet(ContenuViewSet):
    """
    ViewSet pour les livres, filtrables par isActive
    """
    libelle = 'Book'
    queryset = Livre.objects.all()
    serializer_class = LivreSerializer
    filterset_class = LivreFilter
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']
