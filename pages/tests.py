import pytest

from pages.models import DescriptionPage

pytestmark = pytest.mark.django_db

PAGE = {
    'pagePath': '/college/1',
    'title': '1ère année collège',
    'description': 'Cours, devoirs et examens de 1ère année collège',
}


def test_creer_avec_valeurs_par_defaut(client_admin):
    response = client_admin.post('/api/page-descriptions', PAGE, format='json')
    assert response.status_code == 201
    assert response.data['shortDescription'] == ''
    assert response.data['isActive'] is True


def test_chemin_en_double(client_admin):
    client_admin.post('/api/page-descriptions', PAGE, format='json')
    response = client_admin.post('/api/page-descriptions', PAGE, format='json')
    assert response.status_code == 400
    assert response.data['message'] == 'pagePath: Page path already exists'
    assert DescriptionPage.objects.count() == 1


def test_put_garde_son_propre_chemin(client_admin):
    page = client_admin.post(
        '/api/page-descriptions', {**PAGE, 'shortDescription': 'Collège'}, format='json'
    ).data
    response = client_admin.put(
        f"/api/page-descriptions/{page['id']}", {**PAGE, 'title': 'Collège 1'}, format='json'
    )
    assert response.status_code == 200
    assert response.data['title'] == 'Collège 1'
    assert response.data['shortDescription'] == ''


def test_put_vers_un_chemin_existant(client_admin):
    client_admin.post('/api/page-descriptions', PAGE, format='json')
    autre = client_admin.post(
        '/api/page-descriptions', {**PAGE, 'pagePath': '/college/2'}, format='json'
    ).data
    response = client_admin.put(f"/api/page-descriptions/{autre['id']}", PAGE, format='json')
    assert response.status_code == 400
    assert DescriptionPage.objects.get(pk=autre['id']).chemin_page == '/college/2'


def test_supprimer_inexistant(client_admin):
    response = client_admin.delete('/api/page-descriptions/7')
    assert response.status_code == 404
    assert response.data == {'message': 'Page description not found'}
