# utilisateurs/serializers.py
from rest_framework import serializers
from .models import Utilisateur


class UtilisateurSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = Utilisateur
        fields = ['id', 'username', 'role', 'createdAt']
        read_only_fields = ['id', 'role']


class InscriptionSerializer(serializers.Serializer):
    """
    Création d'un compte : identifiant unique, mot de passe d'au moins 6
    caractères. Les contrôles sont faits dans ``validate`` pour renvoyer un
    seul message, dans l'ordre : présence, longueur, unicité.
    """
    username = serializers.CharField(max_length=150, required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(
        write_only=True, trim_whitespace=False, required=False, allow_blank=True, allow_null=True
    )

    def validate(self, attrs):
        username = attrs.get('username')
        password = attrs.get('password')
        if not username or not password:
            raise serializers.ValidationError('Username and password are required')
        if len(password) < 6:
            raise serializers.ValidationError('Password must be at least 6 characters long')
        if Utilisateur.objects.filter(username=username).exists():
            raise serializers.ValidationError('Username already exists')
        return attrs

    def create(self, validated_data):
        return Utilisateur.objects.create_user(
            username=validated_data['username'],
            password=validated_data['password'],
            role='admin',
        )


class ConnexionSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
