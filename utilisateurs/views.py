# utilisateurs/views.py
"""
Authentification du back-office : création de compte, connexion par jeton,
déconnexion et profil courant.
"""
import logging

from django.contrib.auth import authenticate
from rest_framework import status, viewsets
from rest_framework.authtoken.models import Token
from rest_framework.decorators import action
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .serializers import UtilisateurSerializer, InscriptionSerializer, ConnexionSerializer

logger = logging.getLogger(__name__)


class AuthViewSet(viewsets.GenericViewSet):
    """ViewSet pour l'authentification des administrateurs"""
    serializer_class = UtilisateurSerializer

    @action(detail=False, methods=['post'], serializer_class=InscriptionSerializer)
    def register(self, request):
        """Création d'un compte (réservée à un administrateur connecté)"""
        serializer = InscriptionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        utilisateur = serializer.save()
        logger.info(f"Compte créé: {utilisateur.username} (par {request.user.username})")
        return Response(
            {'message': 'User registered successfully'},
            status=status.HTTP_201_CREATED
        )

    @action(detail=False, methods=['post'], permission_classes=[AllowAny],
            serializer_class=ConnexionSerializer)
    def login(self, request):
        """Connexion : retourne un jeton à envoyer dans l'en-tête Authorization"""
        serializer = ConnexionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        utilisateur = authenticate(
            request,
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
        if utilisateur is None or not utilisateur.is_active:
            logger.warning(f"Échec de connexion pour {serializer.validated_data['username']}")
            raise AuthenticationFailed('Invalid credentials')

        token, created = Token.objects.get_or_create(user=utilisateur)
        return Response({
            'token': token.key,
            'user': UtilisateurSerializer(utilisateur).data
        })

    @action(detail=False, methods=['post'])
    def logout(self, request):
        """Déconnexion : supprime le jeton de l'utilisateur"""
        Token.objects.filter(user=request.user).delete()
        return Response({'message': 'Logged out successfully'})

    @action(detail=False, methods=['get'])
    def me(self, request):
        """Utilisateur connecté"""
        return Response(UtilisateurSerializer(request.user).data)
