# contenus/permissions.py
from rest_framework import permissions


class EstConnecte(permissions.BasePermission):
    """
    Garde de session : toute requête, lecture comprise, exige un compte
    authentifié et actif. Vérifiée par DRF avant le code de la vue.
    """

    def has_permission(self, request, view):
        utilisateur = request.user
        return bool(utilisateur and utilisateur.is_authenticated and utilisateur.is_active)
