# academic_structure/registry.py
"""
Registre des catégories de contenu.

Une catégorie associe un nom canonique (``model`` côté API, ex.
``FirstCollegeCourse``) à une famille de contenus, un niveau (``level``),
une classe dans ce niveau (``grade``) et, pour certaines familles, un alias
historique (``type``). Le registre est construit une seule fois à l'import
à partir de la table déclarative ci-dessous et n'est jamais modifié ensuite.

Trois modes d'adressage sont acceptés et mènent à la même catégorie :
    - ``model``            → nom canonique
    - ``type``             → alias historique de la famille
    - ``level`` + ``grade`` → couple niveau / classe
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from contenus.exceptions import CategorieInvalide


NIVEAUX = MappingProxyType({
    'college': ('1', '2', '3'),
    'lycee': (
        '1bac_math', '1bac_science', '1bac_economics', '1bac_letters',
        '2bac_math_a', '2bac_math_b', '2bac_economics', '2bac_letters',
        '2bac_pcsvt', '2bac_tct', '2bac_physics', '2bac_technical',
    ),
    'common_core': (
        'common_core', 'common_core_letters', 'common_core_science', 'common_core_technical',
    ),
    'general': ('general',),
})


@dataclass(frozen=True)
class Famille:
    """Famille de contenus stockée dans une seule table Django"""
    cle: str
    modele: str
    libelle: str

    def modele_django(self):
        return apps.get_model(self.modele)


FAMILLES = MappingProxyType({
    'cours': Famille('cours', 'cours.Cours', 'Course'),
    'devoirs': Famille('devoirs', 'devoirs.Devoir', 'Devoir'),
    'examens': Famille('examens', 'examens.Examen', 'Exam'),
    'examens_blancs': Famille('examens_blancs', 'examens.ExamenBlanc', 'Exam blanc'),
})


@dataclass(frozen=True)
class Categorie:
    nom: str
    famille: str
    niveau: str
    classe: str
    alias: Optional[str] = None

    def objets(self):
        """Queryset de la famille restreint à cette catégorie"""
        modele = FAMILLES[self.famille].modele_django()
        return modele.objects.filter(categorie=self.nom)

    def en_dict(self):
        return {
            'model': self.nom,
            'family': self.famille,
            'level': self.niveau,
            'grade': self.classe,
            'type': self.alias,
        }


# (nom, niveau, classe, alias)
_TABLE = {
    'cours': [
        ('FirstCollegeCourse', 'college', '1', None),
        ('SecondCollegeCourse', 'college', '2', None),
        ('ThirdCollegeCourse', 'college', '3', None),
        ('FirstBacMathCourse', 'lycee', '1bac_math', None),
        ('FirstBacScienceCourse', 'lycee', '1bac_science', None),
        ('FirstBacEconomicsCourse', 'lycee', '1bac_economics', None),
        ('FirstBacLettersCourse', 'lycee', '1bac_letters', None),
        ('SecondBacMathACourse', 'lycee', '2bac_math_a', None),
        ('SecondBacMathBCourse', 'lycee', '2bac_math_b', None),
        ('SecondBacEconomicsCourse', 'lycee', '2bac_economics', None),
        ('SecondBacLettersCourse', 'lycee', '2bac_letters', None),
        ('SecondBacPhysicsChemistryLifeSciencesCourse', 'lycee', '2bac_pcsvt', None),
        ('SecondBacTechnicalCommonCourse', 'lycee', '2bac_tct', None),
        ('CommonCoreCourse', 'common_core', 'common_core', None),
        ('CommonCoreLettersCourse', 'common_core', 'common_core_letters', None),
        ('CommonCoreScienceCourse', 'common_core', 'common_core_science', None),
        ('CommonCoreTechnicalCourse', 'common_core', 'common_core_technical', None),
        ('Course', 'general', 'general', None),
    ],
    'devoirs': [
        ('FirstCollegeDevoir', 'college', '1', '1college'),
        ('SecondCollegeDevoir', 'college', '2', '2college'),
        ('ThirdCollegeDevoir', 'college', '3', '3college'),
        ('FirstBacMathDevoir', 'lycee', '1bac_math', '1bac_math'),
        ('FirstBacScienceDevoir', 'lycee', '1bac_science', '1bac_science'),
        ('FirstBacEconomicsDevoir', 'lycee', '1bac_economics', '1bac_economics'),
        ('FirstBacLettersDevoir', 'lycee', '1bac_letters', '1bac_letters'),
        ('SecondBacMathADevoir', 'lycee', '2bac_math_a', '2bac_math_a'),
        ('SecondBacMathBDevoir', 'lycee', '2bac_math_b', '2bac_math_b'),
        ('SecondBacPhysicsDevoir', 'lycee', '2bac_physics', '2bac_physics'),
        ('SecondBacEconomicsDevoir', 'lycee', '2bac_economics', '2bac_economics'),
        ('SecondBacTechnicalDevoir', 'lycee', '2bac_technical', '2bac_technical'),
        ('SecondBacLettersDevoir', 'lycee', '2bac_letters', '2bac_letters'),
        ('SecondBacPhysicsChemistryLifeSciencesDevoir', 'lycee', '2bac_pcsvt', '2bac_pcsvt'),
        ('SecondBacTechnicalCommonDevoir', 'lycee', '2bac_tct', '2bac_tct'),
        ('CommonCoreLettersDevoir', 'common_core', 'common_core_letters', 'letters'),
        ('CommonCoreScienceDevoir', 'common_core', 'common_core_science', 'science'),
        ('CommonCoreTechnicalDevoir', 'common_core', 'common_core_technical', 'technical'),
    ],
    'examens': [
        ('SecondBacEconomicsExam', 'lycee', '2bac_economics', '2bac_economics'),
        ('SecondBacLettersExam', 'lycee', '2bac_letters', '2bac_letters'),
        ('SecondBacMathAExam', 'lycee', '2bac_math_a', '2bac_math_a'),
        ('SecondBacMathBExam', 'lycee', '2bac_math_b', '2bac_math_b'),
        ('SecondBacTechExam', 'lycee', '2bac_technical', '2bac_tech'),
        ('SecondBacPCSVTExam', 'lycee', '2bac_pcsvt', '2bac_pcsvt'),
    ],
    'examens_blancs': [
        ('SecondBacEconomicsExamBlancs', 'lycee', '2bac_economics', '2bac_economics'),
        ('SecondBacLettersExamBlancs', 'lycee', '2bac_letters', '2bac_letters'),
        ('SecondBacMathAExamBlancs', 'lycee', '2bac_math_a', '2bac_math_a'),
        ('SecondBacMathBExamBlancs', 'lycee', '2bac_math_b', '2bac_math_b'),
        ('SecondBacTechExamBlancs', 'lycee', '2bac_technical', '2bac_tech'),
        ('SecondBacPCSVTExamBlancs', 'lycee', '2bac_pcsvt', '2bac_pcsvt'),
    ],
}


def _construire():
    categories = []
    par_nom, par_alias, par_classe = {}, {}, {}
    for famille, lignes in _TABLE.items():
        if famille not in FAMILLES:
            raise ImproperlyConfigured(f"Famille inconnue dans le registre: {famille}")
        for nom, niveau, classe, alias in lignes:
            if classe not in NIVEAUX.get(niveau, ()):
                raise ImproperlyConfigured(f"{nom}: classe {classe!r} hors du niveau {niveau!r}")
            if nom in par_nom or (famille, niveau, classe) in par_classe:
                raise ImproperlyConfigured(f"Catégorie en double dans le registre: {nom}")
            categorie = Categorie(nom, famille, niveau, classe, alias)
            categories.append(categorie)
            par_nom[nom] = categorie
            par_classe[(famille, niveau, classe)] = categorie
            if alias:
                par_alias[(famille, alias)] = categorie
    return (
        tuple(categories),
        MappingProxyType(par_nom),
        MappingProxyType(par_alias),
        MappingProxyType(par_classe),
    )


_CATEGORIES, _PAR_NOM, _PAR_ALIAS, _PAR_CLASSE = _construire()


def categories(famille: Optional[str] = None) -> Tuple[Categorie, ...]:
    if famille is None:
        return _CATEGORIES
    return tuple(c for c in _CATEGORIES if c.famille == famille)


def categorie_par_nom(nom: str) -> Optional[Categorie]:
    return _PAR_NOM.get(nom)


def niveaux():
    return NIVEAUX


def resoudre(famille: str, model: Optional[str] = None, type: Optional[str] = None,
             level: Optional[str] = None, grade: Optional[str] = None) -> Categorie:
    """
    Résout une clé de catégorie pour une famille donnée.

    Priorité : ``model``, puis ``type``, puis ``level`` + ``grade``.
    Lève CategorieInvalide si aucune clé n'est fournie ou si la clé ne
    désigne aucune catégorie de cette famille (jamais de repli par défaut).
    """
    if famille not in FAMILLES:
        raise CategorieInvalide()

    if model:
        categorie = _PAR_NOM.get(model)
        if categorie is not None and categorie.famille != famille:
            categorie = None
    elif type:
        categorie = _PAR_ALIAS.get((famille, type))
    elif level or grade:
        if grade not in NIVEAUX.get(level, ()):
            raise CategorieInvalide()
        categorie = _PAR_CLASSE.get((famille, level, grade))
    else:
        raise CategorieInvalide('Model parameter is required')

    if categorie is None:
        raise CategorieInvalide()
    return categorie


def filtrer(famille: str, level: Optional[str] = None, grade: Optional[str] = None) -> Tuple[Categorie, ...]:
    """
    Catégories d'une famille filtrées par niveau et/ou classe. Avec les deux
    clés, la classe doit appartenir au niveau demandé.
    """
    if level and level not in NIVEAUX:
        raise CategorieInvalide('Invalid level specified')
    if grade:
        classes_admises = NIVEAUX[level] if level else tuple(c for cl in NIVEAUX.values() for c in cl)
        if grade not in classes_admises:
            raise CategorieInvalide('Invalid grade specified')
    return tuple(
        c for c in categories(famille)
        if (not level or c.niveau == level) and (not grade or c.classe == grade)
    )
