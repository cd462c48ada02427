# examens/filters.py
from django_filters import rest_framework as filters
from examens.models import Examen


class ExamenFilter(filters.FilterSet):
    year = filters.NumberFilter(field_name='annee')

    class Meta:
        model = Examen
        fields = ['year']
