# dishnames/data/default_dishes.py
"""
Document de noms de plats écrit sur disque quand aucun fichier n'existe.
Quelques plats de base à pommes de terre, champignons et riz, plus un combo.
"""

DEFAULT_DISH_DOCUMENT = {
    "ingredients": [
        {
            "def_name": "RawPotatoes",
            "dish_names": [
                "Kettle Porridge",
                "Mashed Potato Soup",
                "Simple Spud Stew",
            ],
        },
        {
            "def_name": "RawFungus",
            "dish_names": ["Fungal Medley", "Mushroom Ragout"],
        },
        {
            "def_name": "RawRice",
            "dish_names": ["Rice Porridge", "Simple Rice Pudding"],
        },
    ],
    "combos": [
        {
            "ingredients": ["RawPotatoes", "RawFungus"],
            "dish_names": ["Potato and Mushroom Casserole", "Earthy Tuber Stew"],
        },
    ],
}
