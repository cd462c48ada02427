# contenus/serializers.py
from rest_framework import serializers


class HorodateSerializer(serializers.ModelSerializer):
    """Champs gérés par le serveur, communs à toutes les entités"""
    createdAt = serializers.DateTimeField(source='date_creation', read_only=True)
    updatedAt = serializers.DateTimeField(source='date_modification', read_only=True)

    champs_serveur = ['id', 'createdAt', 'updatedAt']


class ContenuSerializer(HorodateSerializer):
    """
    Base des contenus rangés par catégorie. La catégorie (model / level /
    grade) est en lecture seule : elle est fixée par la vue à la création.
    """
    model = serializers.CharField(source='categorie', read_only=True)
    level = serializers.SerializerMethodField()
    grade = serializers.SerializerMethodField()

    champs_serveur = HorodateSerializer.champs_serveur + ['model', 'level', 'grade']

    def get_level(self, obj):
        categorie = obj.categorie_registre
        return categorie.niveau if categorie else None

    def get_grade(self, obj):
        categorie = obj.categorie_registre
        return categorie.classe if categorie else None
