# bibliotheque/serializers.py
from rest_framework import serializers
from contenus.serializers import HorodateSerializer
from bibliotheque.models import Livre


class LivreSerializer(HorodateSerializer):
    """
    Serializer pour les livres. Les champs facultatifs absents reprennent
    leur valeur par défaut, y compris lors d'un PUT.
    """
    title = serializers.CharField(source='titre', max_length=200)
    content = serializers.CharField(source='contenu')
    image = serializers.CharField(allow_null=True, allow_blank=True, max_length=500, default=None)
    description = serializers.CharField(allow_blank=True, default='')
    author = serializers.CharField(source='auteur', allow_blank=True, max_length=200, default='')
    isActive = serializers.BooleanField(source='actif', default=True)

    class Meta:
        model = Livre
        fields = HorodateSerializer.champs_serveur + [
            'title', 'content', 'image', 'description', 'author', 'isActive'
        ]

    def validate_image(self, value):
        return value or None
