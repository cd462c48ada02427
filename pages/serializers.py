# pages/serializers.py
from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from contenus.serializers import HorodateSerializer
from pages.models import DescriptionPage


class DescriptionPageSerializer(HorodateSerializer):
    """Serializer pour les descriptions de pages (espaces superflus retirés)"""
    pagePath = serializers.CharField(
        source='chemin_page',
        max_length=255,
        validators=[UniqueValidator(
            queryset=DescriptionPage.objects.all(),
            message='Page path already exists'
        )]
    )
    title = serializers.CharField(source='titre', max_length=200)
    description = serializers.CharField()
    shortDescription = serializers.CharField(
        source='description_courte', allow_blank=True, max_length=300, default=''
    )
    isActive = serializers.BooleanField(source='actif', default=True)

    class Meta:
        model = DescriptionPage
        fields = HorodateSerializer.champs_serveur + [
            'pagePath', 'title', 'description', 'shortDescription', 'isActive'
        ]
