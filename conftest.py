import pytest
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from utilisateurs.models import Utilisateur


@pytest.fixture
def api_client():
    """Client anonyme"""
    return APIClient()


@pytest.fixture
def admin(db):
    return Utilisateur.objects.create_user(username='admin', password='admin123')


@pytest.fixture
def client_admin(admin):
    """Client authentifié par jeton, comme le front d'administration"""
    token, _ = Token.objects.get_or_create(user=admin)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
    return client


@pytest.fixture
def dossier_televersements(settings, tmp_path):
    settings.UPLOAD_ROOT = tmp_path / 'uploads'
    return settings.UPLOAD_ROOT
