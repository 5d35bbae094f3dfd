"""
Données d'amorçage du moteur (document de noms par défaut, gabarits intégrés).
Les getters importent à la demande : rien n'est construit tant qu'on ne lit pas.
"""


def get_DEFAULT_DISH_DOCUMENT():
    from .default_dishes import DEFAULT_DISH_DOCUMENT

    return DEFAULT_DISH_DOCUMENT


def get_DEFAULT_TEMPLATES():
    from .default_templates import DEFAULT_TEMPLATES

    return DEFAULT_TEMPLATES
