import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework.authtoken.models import Token

from utilisateurs.models import Utilisateur

pytestmark = pytest.mark.django_db


def test_inscription(client_admin):
    response = client_admin.post(
        '/api/auth/register', {'username': 'redacteur', 'password': 'secret1'}, format='json'
    )
    assert response.status_code == 201
    assert response.data == {'message': 'User registered successfully'}

    utilisateur = Utilisateur.objects.get(username='redacteur')
    assert utilisateur.role == 'admin'
    assert utilisateur.check_password('secret1')
    assert utilisateur.password != 'secret1'


@pytest.mark.parametrize('donnees, message', [
    ({'username': 'redacteur'}, 'Username and password are required'),
    ({'password': 'secret1'}, 'Username and password are required'),
    ({}, 'Username and password are required'),
    ({'username': '', 'password': 'secret1'}, 'Username and password are required'),
    ({'username': 'redacteur', 'password': 'abc'}, 'Password must be at least 6 characters long'),
    ({'username': 'admin', 'password': 'secret1'}, 'Username already exists'),
])
def test_inscription_refusee(client_admin, donnees, message):
    response = client_admin.post('/api/auth/register', donnees, format='json')
    assert response.status_code == 400
    assert response.data['message'] == message
    assert Utilisateur.objects.count() == 1


def test_inscription_sans_session(api_client, admin):
    response = api_client.post(
        '/api/auth/register', {'username': 'intrus', 'password': 'secret1'}, format='json'
    )
    assert response.status_code == 401
    assert not Utilisateur.objects.filter(username='intrus').exists()


def test_connexion_puis_deconnexion(api_client, admin):
    response = api_client.post('/api/auth/login', {'username': 'admin', 'password': 'admin123'}, format='json')
    assert response.status_code == 200
    assert response.data['user']['username'] == 'admin'
    jeton = response.data['token']

    api_client.credentials(HTTP_AUTHORIZATION=f'Token {jeton}')
    response = api_client.get('/api/auth/me')
    assert response.status_code == 200
    assert response.data['username'] == 'admin'

    response = api_client.post('/api/auth/logout')
    assert response.status_code == 200
    assert not Token.objects.filter(key=jeton).exists()

    response = api_client.get('/api/auth/me')
    assert response.status_code == 401


def test_connexion_refusee(api_client, admin):
    response = api_client.post('/api/auth/login', {'username': 'admin', 'password': 'faux'}, format='json')
    assert response.status_code == 401
    assert response.data == {'message': 'Invalid credentials'}
    assert not Token.objects.exists()


def test_compte_desactive(client_admin, admin):
    admin.is_active = False
    admin.save()
    response = client_admin.get('/api/auth/me')
    assert response.status_code == 401


def test_commande_creer_admin():
    call_command('creer_admin', '--username', 'root', '--password', 'motdepasse')
    utilisateur = Utilisateur.objects.get(username='root')
    assert utilisateur.is_superuser
    assert utilisateur.check_password('motdepasse')

    # Idempotente
    call_command('creer_admin', '--username', 'root', '--password', 'autre-mdp')
    assert Utilisateur.objects.filter(username='root').count() == 1
    assert Utilisateur.objects.get(username='root').check_password('motdepasse')


def test_commande_creer_admin_sans_mot_de_passe(monkeypatch):
    monkeypatch.delenv('ADMIN_PASSWORD', raising=False)
    with pytest.raises(CommandError):
        call_command('creer_admin')
    assert not Utilisateur.objects.exists()
