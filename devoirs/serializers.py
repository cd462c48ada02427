# devoirs/serializers.py
from rest_framework import serializers
from contenus.serializers import ContenuSerializer
from devoirs.models import Devoir


class DevoirSerializer(ContenuSerializer):
    """Serializer pour les devoirs (contenu HTML + PDF facultatif)"""
    title = serializers.CharField(source='titre', max_length=200)
    content = serializers.CharField(source='contenu')
    pdfUrl = serializers.CharField(
        source='url_pdf', required=False, allow_null=True, allow_blank=True, max_length=500
    )
    semester = serializers.ChoiceField(source='semestre', choices=[1, 2])

    class Meta:
        model = Devoir
        fields = ContenuSerializer.champs_serveur + ['title', 'content', 'pdfUrl', 'semester']

    def validate_pdfUrl(self, value):
        # Une chaîne vide efface le PDF
        return value or None
