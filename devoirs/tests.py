import pytest

from devoirs.models import Devoir

pytestmark = pytest.mark.django_db

DEVOIR = {
    'model': 'FirstBacMathDevoir',
    'title': 'Devoir 1',
    'content': '<p>Exercice 1</p>',
    'semester': 1,
}


def creer_devoir(client, **champs):
    response = client.post('/api/devoirs', {**DEVOIR, **champs}, format='json')
    assert response.status_code == 201, response.data
    return response.data


def test_creer(client_admin):
    devoir = creer_devoir(client_admin, pdfUrl='/uploads/pdfs/d1.pdf')
    assert devoir['title'] == 'Devoir 1'
    assert devoir['semester'] == 1
    assert devoir['pdfUrl'] == '/uploads/pdfs/d1.pdf'
    assert devoir['level'] == 'lycee'
    assert devoir['grade'] == '1bac_math'


def test_creer_par_alias(client_admin):
    donnees = {k: v for k, v in DEVOIR.items() if k != 'model'}
    donnees['type'] = 'science'
    response = client_admin.post('/api/devoirs', donnees, format='json')
    assert response.status_code == 201
    assert response.data['model'] == 'CommonCoreScienceDevoir'


def test_semestre_invalide(client_admin):
    response = client_admin.post('/api/devoirs', {**DEVOIR, 'semester': 3}, format='json')
    assert response.status_code == 400
    assert 'semester' in response.data['errors']
    assert Devoir.objects.count() == 0


def test_filtre_par_semestre(client_admin):
    s1 = creer_devoir(client_admin)
    s2 = creer_devoir(client_admin, semester=2, title='Devoir 2')

    response = client_admin.get('/api/devoirs', {'model': 'FirstBacMathDevoir'})
    assert [d['id'] for d in response.data] == [s2['id'], s1['id']]

    response = client_admin.get('/api/devoirs', {'model': 'FirstBacMathDevoir', 'semester': 2})
    assert [d['id'] for d in response.data] == [s2['id']]


def test_patch_remplace_le_devoir(client_admin):
    devoir = creer_devoir(client_admin, pdfUrl='/uploads/pdfs/d1.pdf')

    # Champs obligatoires manquants : refusé
    response = client_admin.patch(f"/api/devoirs/{devoir['id']}", {'title': 'Nouveau'}, format='json')
    assert response.status_code == 400
    assert set(response.data['errors']) == {'content', 'semester'}

    response = client_admin.patch(
        f"/api/devoirs/{devoir['id']}",
        {'title': 'Nouveau', 'content': '<p>v2</p>', 'semester': 2},
        format='json'
    )
    assert response.status_code == 200
    assert response.data['title'] == 'Nouveau'
    assert response.data['semester'] == 2
    # PDF non envoyé : conservé
    assert response.data['pdfUrl'] == '/uploads/pdfs/d1.pdf'


def test_pdf_vide_efface(client_admin):
    devoir = creer_devoir(client_admin, pdfUrl='/uploads/pdfs/d1.pdf')
    response = client_admin.patch(
        f"/api/devoirs/{devoir['id']}",
        {'title': 'Devoir 1', 'content': 'x', 'semester': 1, 'pdfUrl': ''},
        format='json'
    )
    assert response.status_code == 200
    assert response.data['pdfUrl'] is None


def test_supprimer(client_admin):
    devoir = creer_devoir(client_admin)
    response = client_admin.delete(f"/api/devoirs/{devoir['id']}")
    assert response.status_code == 200
    assert response.data == {'message': 'Devoir deleted successfully'}

    response = client_admin.delete(f"/api/devoirs/{devoir['id']}")
    assert response.status_code == 404
    assert response.data == {'message': 'Devoir not found'}


def test_suppression_sans_session(api_client, client_admin):
    devoir = creer_devoir(client_admin)
    response = api_client.delete(f"/api/devoirs/{devoir['id']}")
    assert response.status_code == 401
    assert Devoir.objects.filter(pk=devoir['id']).exists()
