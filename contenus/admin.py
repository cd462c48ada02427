# contenus/admin.py
from django import forms

from academic_structure import registry


def formulaire_categorie(modele, famille):
    """Formulaire d'admin dont le champ catégorie ne propose que celles de la famille"""
    choix = [
        (c.nom, f"{c.nom} ({c.niveau} / {c.classe})")
        for c in registry.categories(famille)
    ]

    class FormulaireContenu(forms.ModelForm):
        categorie = forms.ChoiceField(choices=choix)

        class Meta:
            model = modele
            fields = '__all__'

    return FormulaireContenu
