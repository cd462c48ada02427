import pytest

from bibliotheque.models import Livre

pytestmark = pytest.mark.django_db


def creer_livre(client, **champs):
    donnees = {'title': 'Les Misérables', 'content': '<p>Résumé</p>', **champs}
    response = client.post('/api/books', donnees, format='json')
    assert response.status_code == 201, response.data
    return response.data


def test_valeurs_par_defaut(client_admin):
    livre = creer_livre(client_admin)
    assert livre['image'] is None
    assert livre['description'] == ''
    assert livre['author'] == ''
    assert livre['isActive'] is True
    assert 'model' not in livre


def test_put_remplace_le_livre(client_admin):
    livre = creer_livre(client_admin, author='Victor Hugo', description='Roman', isActive=False)

    response = client_admin.put(
        f"/api/books/{livre['id']}", {'title': 'Notre-Dame de Paris', 'content': '<p>v2</p>'}, format='json'
    )
    assert response.status_code == 200
    assert response.data['title'] == 'Notre-Dame de Paris'
    # Champs facultatifs absents : remis à leur valeur par défaut
    assert response.data['author'] == ''
    assert response.data['description'] == ''
    assert response.data['isActive'] is True


def test_put_champs_obligatoires(client_admin):
    livre = creer_livre(client_admin)
    response = client_admin.put(f"/api/books/{livre['id']}", {'title': 'X'}, format='json')
    assert response.status_code == 400
    assert response.data['message'] == 'content: This field is required.'


def test_patch_non_expose(client_admin):
    livre = creer_livre(client_admin)
    response = client_admin.patch(f"/api/books/{livre['id']}", {'title': 'X'}, format='json')
    assert response.status_code == 405


def test_filtre_actifs(client_admin):
    actif = creer_livre(client_admin)
    creer_livre(client_admin, isActive=False)
    response = client_admin.get('/api/books', {'isActive': 'true'})
    assert [l['id'] for l in response.data] == [actif['id']]


def test_liste_sans_categorie(client_admin):
    premier = creer_livre(client_admin)
    second = creer_livre(client_admin)
    response = client_admin.get('/api/books')
    assert response.status_code == 200
    assert [l['id'] for l in response.data] == [second['id'], premier['id']]


def test_supprimer(client_admin, api_client):
    livre = creer_livre(client_admin)

    response = api_client.delete(f"/api/books/{livre['id']}")
    assert response.status_code == 401
    assert Livre.objects.count() == 1

    response = client_admin.delete(f"/api/books/{livre['id']}")
    assert response.data == {'message': 'Book deleted successfully'}

    response = client_admin.delete(f"/api/books/{livre['id']}")
    assert response.status_code == 404
    assert response.data == {'message': 'Book not found'}
