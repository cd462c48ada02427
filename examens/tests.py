import pytest

from examens.models import Examen, ExamenBlanc

pytestmark = pytest.mark.django_db

SUJET = {
    'title': 'Mathématiques',
    'pdfUrl': '/uploads/pdfs/math.pdf',
    'content': '<p>Sujet</p>',
}


def test_examen_par_alias_et_annee(client_admin):
    response = client_admin.post(
        '/api/exams', {**SUJET, 'type': '2bac_tech', 'year': 2023}, format='json'
    )
    assert response.status_code == 201, response.data
    assert response.data['model'] == 'SecondBacTechExam'
    assert response.data['grade'] == '2bac_technical'
    assert response.data['solutionUrl'] is None

    client_admin.post('/api/exams', {**SUJET, 'type': '2bac_tech', 'year': 2022}, format='json')

    response = client_admin.get('/api/exams', {'type': '2bac_tech', 'year': 2023})
    assert [e['year'] for e in response.data] == [2023]


def test_annee_hors_limites(client_admin):
    response = client_admin.post(
        '/api/exams', {**SUJET, 'model': 'SecondBacPCSVTExam', 'year': 1800}, format='json'
    )
    assert response.status_code == 400
    assert 'year' in response.data['errors']


def test_pdf_obligatoire(client_admin):
    donnees = {k: v for k, v in SUJET.items() if k != 'pdfUrl'}
    response = client_admin.post(
        '/api/exam-blancs', {**donnees, 'model': 'SecondBacLettersExamBlancs'}, format='json'
    )
    assert response.status_code == 400
    assert 'pdfUrl' in response.data['errors']
    assert ExamenBlanc.objects.count() == 0


def test_categorie_d_une_autre_famille(client_admin):
    response = client_admin.post(
        '/api/exam-blancs', {**SUJET, 'model': 'SecondBacLettersExam'}, format='json'
    )
    assert response.status_code == 400
    assert response.data == {'message': 'Invalid model specified'}


def test_examen_blanc_patch_et_suppression(client_admin):
    response = client_admin.post(
        '/api/exam-blancs', {**SUJET, 'model': 'SecondBacMathAExamBlancs'}, format='json'
    )
    examen = response.data

    response = client_admin.patch(
        f"/api/exam-blancs/{examen['id']}",
        {**SUJET, 'title': 'Maths v2', 'solutionUrl': '/uploads/pdfs/corrige.pdf'},
        format='json'
    )
    assert response.status_code == 200
    assert response.data['title'] == 'Maths v2'
    assert response.data['solutionUrl'] == '/uploads/pdfs/corrige.pdf'

    response = client_admin.delete(f"/api/exam-blancs/{examen['id']}?model=SecondBacMathAExamBlancs")
    assert response.status_code == 200
    assert response.data == {'message': 'Exam blanc deleted successfully'}
    assert not ExamenBlanc.objects.exists()


def test_examen_introuvable(client_admin):
    response = client_admin.get('/api/exams/42')
    assert response.status_code == 404
    assert response.data == {'message': 'Exam not found'}
    assert Examen.objects.count() == 0
