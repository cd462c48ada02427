import pytest

from cours.models import Cours

pytestmark = pytest.mark.django_db


def creer_cours(client, nom, model='FirstCollegeCourse', **champs):
    response = client.post('/api/courses', {'model': model, 'name': nom, **champs}, format='json')
    assert response.status_code == 201, response.data
    return response.data


def test_creer_puis_lister(client_admin):
    cours = creer_cours(client_admin, 'Algebra I')
    assert cours['name'] == 'Algebra I'
    assert cours['courseLink'] is None
    assert cours['model'] == 'FirstCollegeCourse'
    assert cours['level'] == 'college'
    assert cours['grade'] == '1'
    assert cours['id']

    response = client_admin.get('/api/courses', {'model': 'FirstCollegeCourse'})
    assert response.status_code == 200
    assert response.data[0]['id'] == cours['id']


def test_liste_du_plus_recent_au_plus_ancien(client_admin):
    ids = [creer_cours(client_admin, nom)['id'] for nom in ('Un', 'Deux', 'Trois')]
    response = client_admin.get('/api/courses', {'model': 'FirstCollegeCourse'})
    assert [c['id'] for c in response.data] == list(reversed(ids))


def test_liste_vide_et_partitions_isolees(client_admin):
    creer_cours(client_admin, 'Algebra I')
    response = client_admin.get('/api/courses', {'model': 'SecondCollegeCourse'})
    assert response.status_code == 200
    assert response.data == []


def test_liste_par_niveau_et_classe(client_admin):
    cours = creer_cours(client_admin, 'Mécanique', model='SecondBacMathACourse')
    response = client_admin.get('/api/courses', {'level': 'lycee', 'grade': '2bac_math_a'})
    assert [c['id'] for c in response.data] == [cours['id']]


def test_liste_sans_categorie(client_admin):
    response = client_admin.get('/api/courses')
    assert response.status_code == 400
    assert response.data == {'message': 'Model parameter is required'}


def test_categorie_inconnue(client_admin):
    response = client_admin.post('/api/courses', {'model': 'FifthCollegeCourse', 'name': 'X'}, format='json')
    assert response.status_code == 400
    assert response.data == {'message': 'Invalid model specified'}
    assert Cours.objects.count() == 0


def test_creer_puis_lire(client_admin):
    cours = creer_cours(client_admin, 'Géométrie', courseLink='https://cours/geo.pdf')
    response = client_admin.get(f"/api/courses/{cours['id']}")
    assert response.status_code == 200
    assert response.data == cours


def test_nom_trop_long(client_admin):
    response = client_admin.post('/api/courses', {'model': 'FirstCollegeCourse', 'name': 'x' * 61}, format='json')
    assert response.status_code == 400
    assert response.data['message'] == 'name: Name cannot be more than 60 characters'
    assert 'name' in response.data['errors']


def test_nom_obligatoire(client_admin):
    response = client_admin.post('/api/courses', {'model': 'FirstCollegeCourse'}, format='json')
    assert response.status_code == 400
    assert 'name' in response.data['errors']


def test_patch_partiel(client_admin):
    cours = creer_cours(client_admin, 'Algebra I', courseLink='https://cours/a.pdf')
    response = client_admin.patch(
        f"/api/courses/{cours['id']}",
        {'model': 'FirstCollegeCourse', 'exerciseLink': 'https://cours/ex.pdf'},
        format='json'
    )
    assert response.status_code == 200
    assert response.data['name'] == 'Algebra I'
    assert response.data['courseLink'] == 'https://cours/a.pdf'
    assert response.data['exerciseLink'] == 'https://cours/ex.pdf'


def test_patch_categorie_qui_ne_correspond_pas(client_admin):
    cours = creer_cours(client_admin, 'Algebra I')
    response = client_admin.patch(
        f"/api/courses/{cours['id']}", {'model': 'SecondCollegeCourse', 'name': 'B'}, format='json'
    )
    assert response.status_code == 404
    assert response.data == {'message': 'Course not found'}
    assert Cours.objects.get(pk=cours['id']).nom == 'Algebra I'


def test_put_non_expose(client_admin):
    cours = creer_cours(client_admin, 'Algebra I')
    response = client_admin.put(f"/api/courses/{cours['id']}", {'name': 'B'}, format='json')
    assert response.status_code == 405


def test_supprimer(client_admin):
    cours = creer_cours(client_admin, 'Algebra I')
    response = client_admin.delete(f"/api/courses/{cours['id']}?model=FirstCollegeCourse")
    assert response.status_code == 200
    assert response.data == {'message': 'Course deleted successfully'}
    assert not Cours.objects.filter(pk=cours['id']).exists()


def test_supprimer_inexistant(client_admin):
    creer_cours(client_admin, 'Algebra I')
    response = client_admin.delete('/api/courses/9999')
    assert response.status_code == 404
    assert response.data == {'message': 'Course not found'}
    assert Cours.objects.count() == 1


def test_sans_session_aucun_effet(api_client, client_admin):
    donnees = {'model': 'FirstCollegeCourse', 'name': 'Algebra I'}
    response = api_client.post('/api/courses', donnees, format='json')
    assert response.status_code == 401
    assert response.data == {'message': 'Unauthorized'}
    assert Cours.objects.count() == 0

    response = client_admin.post('/api/courses', donnees, format='json')
    assert response.status_code == 201
    assert Cours.objects.count() == 1


def test_lecture_sans_session(api_client):
    response = api_client.get('/api/courses', {'model': 'FirstCollegeCourse'})
    assert response.status_code == 401


def test_tous_les_cours(client_admin):
    college = creer_cours(client_admin, 'Algebra I')
    lycee = creer_cours(client_admin, 'Analyse', model='SecondBacMathBCourse')

    response = client_admin.get('/api/courses/all')
    assert [c['id'] for c in response.data] == [lycee['id'], college['id']]

    response = client_admin.get('/api/courses/all', {'level': 'college'})
    assert [c['id'] for c in response.data] == [college['id']]

    response = client_admin.get('/api/courses/all', {'grade': '2bac_math_b'})
    assert [c['id'] for c in response.data] == [lycee['id']]

    response = client_admin.get('/api/courses/all', {'level': 'primaire'})
    assert response.status_code == 400
    assert response.data == {'message': 'Invalid level specified'}

    response = client_admin.get('/api/courses/all', {'level': 'college', 'grade': '2bac_math_a'})
    assert response.status_code == 400
    assert response.data == {'message': 'Invalid grade specified'}
