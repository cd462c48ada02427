# bibliotheque/filters.py
from django_filters import rest_framework as filters
from bibliotheque.models import Livre


class LivreFilter(filters.FilterSet):
    isActive = filters.BooleanFilter(field_name='actif')

    class Meta:
        model = Livre
        fields = ['isActive']
