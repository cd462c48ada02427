# examens/serializers.py
from rest_framework import serializers
from contenus.serializers import ContenuSerializer
from examens.models import Examen, ExamenBlanc


class SujetSerializer(ContenuSerializer):
    """Champs communs aux examens et examens blancs"""
    title = serializers.CharField(source='titre', max_length=200)
    pdfUrl = serializers.CharField(source='url_pdf', max_length=500)
    content = serializers.CharField(source='contenu')
    solutionUrl = serializers.CharField(
        source='url_solution', required=False, allow_null=True, allow_blank=True, max_length=500
    )

    champs_sujet = ContenuSerializer.champs_serveur + ['title', 'pdfUrl', 'content', 'solutionUrl']

    def validate_solutionUrl(self, value):
        # Une chaîne vide efface le corrigé
        return value or None


class ExamenSerializer(SujetSerializer):
    """Serializer pour les examens"""
    year = serializers.IntegerField(source='annee', min_value=1900, max_value=2100)

    class Meta:
        model = Examen
        fields = SujetSerializer.champs_sujet + ['year']


class ExamenBlancSerializer(SujetSerializer):
    """Serializer pour les examens blancs"""

    class Meta:
        model = ExamenBlanc
        fields = SujetSerializer.champs_sujet
