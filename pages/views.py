# pages/views.py
from contenus.viewsets import ContenuViewSet
from pages.filters import DescriptionPageFilter
from pages.models import DescriptionPage
from pages.serializers import DescriptionPageSerializer


class DescriptionPageViewSet(ContenuViewSet):
    libelle = 'Page description'
    queryset = DescriptionPage.objects.all()
    serializer_class = DescriptionPageSerializer
    filterset_class = DescriptionPageFilter
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']
