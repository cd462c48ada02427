# cours/serializers.py
from rest_framework import serializers
from contenus.serializers import ContenuSerializer
from cours.models import Cours


def _lien(source):
    return serializers.CharField(
        source=source, required=False, allow_null=True, allow_blank=True, max_length=500
    )


class CoursSerializer(ContenuSerializer):
    """Serializer pour les cours"""
    name = serializers.CharField(
        source='nom',
        max_length=60,
        error_messages={'max_length': 'Name cannot be more than 60 characters'}
    )
    courseLink = _lien('lien_cours')
    exerciseLink = _lien('lien_exercices')
    devoirLink = _lien('lien_devoir')
    examenLink = _lien('lien_examen')

    class Meta:
        model = Cours
        fields = ContenuSerializer.champs_serveur + [
            'name', 'courseLink', 'exerciseLink', 'devoirLink', 'examenLink'
        ]
