# pages/filters.py
from django_filters import rest_framework as filters
from pages.models import DescriptionPage


class DescriptionPageFilter(filters.FilterSet):
    isActive = filters.BooleanFilter(field_name='actif')

    class Meta:
        model = DescriptionPage
        fields = ['isActive']
