# contenus/exceptions.py
"""
Taxonomie des erreurs de l'API et gestionnaire d'exceptions DRF.

Toutes les erreurs sortent sous la forme ``{"message": "..."}`` ; les erreurs
de validation portent en plus le détail par champ dans ``errors``.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class CategorieInvalide(APIException):
    """Clé de catégorie (model / type / level+grade) introuvable dans le registre"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid model specified'
    default_code = 'invalid_category'


class TeleversementRefuse(APIException):
    """Fichier refusé avant écriture (taille ou type MIME)"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'File type not allowed'
    default_code = 'upload_rejected'


def _messages(detail, champ=None):
    """Aplatit le détail d'une ValidationError en messages « champ: erreur »."""
    if isinstance(detail, dict):
        for cle, valeur in detail.items():
            if cle == api_settings.NON_FIELD_ERRORS_KEY:
                cle = champ
            yield from _messages(valeur, cle)
    elif isinstance(detail, (list, tuple)):
        for valeur in detail:
            yield from _messages(valeur, champ)
    else:
        yield f"{champ}: {detail}" if champ else str(detail)


def gestionnaire_exceptions(exc, context):
    """Convertit toute exception levée par une vue en réponse ``{"message": ...}``."""
    response = exception_handler(exc, context)

    if response is None:
        vue = context.get('view')
        logger.exception(f"Erreur inattendue dans {vue.__class__.__name__}: {exc}")
        set_rollback()
        return Response(
            {'message': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        donnees = {'message': ', '.join(_messages(exc.detail)) or 'Invalid data'}
        if isinstance(exc.detail, dict):
            donnees['errors'] = exc.detail
        response.data = donnees
    elif isinstance(exc, NotAuthenticated):
        response.data = {'message': 'Unauthorized'}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': str(response.data['detail'])}

    return response
