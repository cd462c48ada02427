from types import SimpleNamespace

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from contenus.exceptions import TeleversementRefuse
from televersement.handlers import ControleTeleversementHandler
from televersement.services import nom_unique, verifier_fichier

MO = 1024 * 1024


def fichier(nom, type_mime, taille):
    return SimpleUploadedFile(nom, b'\0' * taille, content_type=type_mime)


def test_fichier_trop_volumineux_refuse_avant_lecture():
    volumineux = SimpleNamespace(name='cours.pdf', content_type='application/pdf', size=60 * MO)
    with pytest.raises(TeleversementRefuse) as erreur:
        verifier_fichier(volumineux)
    assert str(erreur.value.detail) == 'File size too large. Maximum size is 50MB'


def test_nom_unique():
    premier = nom_unique('mon cours.pdf')
    second = nom_unique('mon cours.pdf')
    assert premier != second
    assert premier.endswith('-mon_cours.pdf')
    assert nom_unique('../../etc/passwd').endswith('-passwd')


@pytest.mark.django_db
def test_image_acceptee(client_admin, dossier_televersements):
    response = client_admin.post(
        '/api/upload', {'file': fichier('schema.png', 'image/png', 2 * MO)}, format='multipart'
    )
    assert response.status_code == 200
    url = response.data['url']
    assert url.startswith('/uploads/images/')
    assert url.endswith('-schema.png')
    assert (dossier_televersements / 'images' / url.rsplit('/', 1)[1]).exists()


@pytest.mark.django_db
def test_pdf_et_video_ranges_par_type(client_admin, dossier_televersements):
    response = client_admin.post(
        '/api/upload', {'file': fichier('sujet.pdf', 'application/pdf', 1024)}, format='multipart'
    )
    assert response.data['url'].startswith('/uploads/pdfs/')
    response = client_admin.post(
        '/api/upload', {'file': fichier('cours.mp4', 'video/mp4', 1024)}, format='multipart'
    )
    assert response.data['url'].startswith('/uploads/videos/')


@pytest.mark.django_db
def test_type_refuse(client_admin, dossier_televersements):
    response = client_admin.post(
        '/api/upload', {'file': fichier('archive.zip', 'application/zip', 1024)}, format='multipart'
    )
    assert response.status_code == 400
    assert response.data == {'message': 'File type not allowed'}
    assert not dossier_televersements.exists()


@pytest.mark.django_db
def test_taille_maximale_configurable(client_admin, dossier_televersements, settings):
    settings.UPLOAD_MAX_SIZE = 1 * MO
    response = client_admin.post(
        '/api/upload', {'file': fichier('schema.png', 'image/png', 2 * MO)}, format='multipart'
    )
    assert response.status_code == 400
    assert response.data == {'message': 'File size too large. Maximum size is 1MB'}
    assert not dossier_televersements.exists()


@pytest.mark.django_db
def test_aucun_fichier(client_admin):
    response = client_admin.post('/api/upload', {}, format='multipart')
    assert response.status_code == 400
    assert response.data == {'message': 'No file uploaded'}


@pytest.mark.django_db
def test_televersement_sans_session(api_client, dossier_televersements):
    response = api_client.post(
        '/api/upload', {'file': fichier('schema.png', 'image/png', 1024)}, format='multipart'
    )
    assert response.status_code == 401
    assert not dossier_televersements.exists()


def test_envoi_interrompu_des_que_la_limite_est_depassee():
    gestionnaire = ControleTeleversementHandler()
    gestionnaire.new_file('file', 'cours.mp4', 'video/mp4', None)
    morceau = b'\0' * (64 * 1024)
    assert gestionnaire.receive_data_chunk(morceau, 0) == morceau
    with pytest.raises(TeleversementRefuse) as erreur:
        gestionnaire.receive_data_chunk(morceau, 60 * MO)
    assert str(erreur.value.detail) == 'File size too large. Maximum size is 50MB'


def test_type_refuse_a_l_en_tete():
    gestionnaire = ControleTeleversementHandler()
    with pytest.raises(TeleversementRefuse):
        gestionnaire.new_file('file', 'archive.zip', 'application/zip', None)


@pytest.mark.django_db
def test_fichier_au_dela_de_la_limite_refuse_par_l_api(client_admin, dossier_televersements, settings):
    # Au-delà du seuil mémoire de Django (2,5 Mo) : le fichier part vers un fichier temporaire
    settings.UPLOAD_MAX_SIZE = 3 * MO
    response = client_admin.post(
        '/api/upload', {'file': fichier('cours.mp4', 'video/mp4', 4 * MO)}, format='multipart'
    )
    assert response.status_code == 400
    assert response.data == {'message': 'File size too large. Maximum size is 3MB'}
    assert not dossier_televersements.exists()
