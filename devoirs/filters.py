# devoirs/filters.py
from django_filters import rest_framework as filters
from devoirs.models import Devoir


class DevoirFilter(filters.FilterSet):
    semester = filters.ChoiceFilter(field_name='semestre', choices=Devoir.SEMESTRES)

    class Meta:
        model = Devoir
        fields = ['semester']
