import pytest
from django.apps import apps

from academic_structure import registry
from contenus.exceptions import CategorieInvalide


def test_nombre_de_categories_par_famille():
    assert len(registry.categories('cours')) == 18
    assert len(registry.categories('devoirs')) == 18
    assert len(registry.categories('examens')) == 6
    assert len(registry.categories('examens_blancs')) == 6
    assert len(registry.categories()) == 48


def test_chaque_categorie_pointe_vers_un_modele_installe():
    for categorie in registry.categories():
        famille = registry.FAMILLES[categorie.famille]
        assert famille.modele_django() is apps.get_model(famille.modele)
        assert categorie.classe in registry.NIVEAUX[categorie.niveau]


def test_les_trois_adressages_menent_a_la_meme_categorie():
    par_nom = registry.resoudre('devoirs', model='CommonCoreScienceDevoir')
    par_alias = registry.resoudre('devoirs', type='science')
    par_classe = registry.resoudre('devoirs', level='common_core', grade='common_core_science')
    assert par_nom is par_alias is par_classe


def test_chaque_categorie_resolue_par_les_trois_adressages():
    for categorie in registry.categories():
        famille = categorie.famille
        assert registry.resoudre(famille, model=categorie.nom) is categorie
        assert registry.resoudre(famille, level=categorie.niveau, grade=categorie.classe) is categorie
        if categorie.alias:
            assert registry.resoudre(famille, type=categorie.alias) is categorie
        assert categorie.objets().model is registry.FAMILLES[famille].modele_django()


def test_model_prioritaire_sur_type():
    categorie = registry.resoudre('examens', model='SecondBacPCSVTExam', type='2bac_tech')
    assert categorie.nom == 'SecondBacPCSVTExam'


@pytest.mark.parametrize('cles', [
    {'model': 'InexistantCourse'},
    {'model': 'SecondBacMathAExam'},      # catégorie d'une autre famille
    {'type': '1college'},                 # alias inconnu pour les cours
    {'level': 'college', 'grade': '2bac_math_a'},
    {'level': 'lycee'},
    {'grade': '1'},
])
def test_cle_inconnue_refusee(cles):
    with pytest.raises(CategorieInvalide) as erreur:
        registry.resoudre('cours', **cles)
    assert str(erreur.value.detail) == 'Invalid model specified'


def test_cle_absente():
    with pytest.raises(CategorieInvalide) as erreur:
        registry.resoudre('cours')
    assert str(erreur.value.detail) == 'Model parameter is required'


def test_le_registre_est_en_lecture_seule():
    with pytest.raises(TypeError):
        registry.NIVEAUX['primaire'] = ('1',)
    with pytest.raises(TypeError):
        registry.FAMILLES['quiz'] = None


def test_filtrer_par_niveau_et_classe():
    lycee = registry.filtrer('cours', level='lycee')
    assert len(lycee) == 10
    assert all(c.niveau == 'lycee' for c in lycee)
    assert [c.nom for c in registry.filtrer('cours', grade='2bac_pcsvt')] == [
        'SecondBacPhysicsChemistryLifeSciencesCourse'
    ]
    with pytest.raises(CategorieInvalide):
        registry.filtrer('cours', level='primaire')
    with pytest.raises(CategorieInvalide):
        registry.filtrer('cours', grade='cm2')


@pytest.mark.django_db
def test_liste_des_categories(client_admin):
    response = client_admin.get('/api/categories', {'family': 'examens'})
    assert response.status_code == 200
    assert len(response.data) == 6
    assert response.data[0]['family'] == 'examens'

    response = client_admin.get('/api/categories', {'family': 'quiz'})
    assert response.status_code == 400
    assert response.data == {'message': 'Invalid family specified'}


@pytest.mark.django_db
def test_liste_des_niveaux(client_admin):
    response = client_admin.get('/api/levels')
    assert response.status_code == 200
    niveaux = {n['level']: n['grades'] for n in response.data}
    assert niveaux['college'] == ['1', '2', '3']
    assert 'general' in niveaux


@pytest.mark.django_db
def test_registre_refuse_sans_session(api_client):
    response = api_client.get('/api/categories')
    assert response.status_code == 401
    assert response.data == {'message': 'Unauthorized'}


def test_filtrer_refuse_une_classe_hors_du_niveau():
    with pytest.raises(CategorieInvalide) as erreur:
        registry.filtrer('cours', level='college', grade='2bac_math_a')
    assert str(erreur.value.detail) == 'Invalid grade specified'
