# academic_structure/serializers.py
from rest_framework import serializers


class CategorieSerializer(serializers.Serializer):
    """Serializer pour une catégorie du registre (lecture seule)"""
    model = serializers.CharField(source='nom', read_only=True)
    family = serializers.CharField(source='famille', read_only=True)
    level = serializers.CharField(source='niveau', read_only=True)
    grade = serializers.CharField(source='classe', read_only=True)
    type = serializers.CharField(source='alias', read_only=True, allow_null=True)


class NiveauSerializer(serializers.Serializer):
    """Serializer pour un niveau et ses classes"""
    level = serializers.CharField(read_only=True)
    grades = serializers.ListField(child=serializers.CharField(), read_only=True)
