# smoke_test.py
"""
Smoke test minimal — un lot de cuisine de bout en bout.
Valide :
- démarrage du moteur dans un dossier temporaire (document par défaut écrit),
- enregistrement d'un lot et sortie de plusieurs repas,
- même nom pour tous les repas du lot,
- libération du lot,
- quelques résolutions hors lot (base de noms puis génération).
"""

import tempfile
from pathlib import Path
from types import SimpleNamespace

from dishnames import DishNameEngine, Settings, configure_logging
from dishnames.domain import MealItem


def main():
    configure_logging("INFO")
    with tempfile.TemporaryDirectory() as tmp:
        # 1) Moteur sur un dossier vierge
        engine = DishNameEngine.initialize(Settings(data_dir=Path(tmp) / "Database"))
        report = engine.load_report
        print(f"✔ Base chargée : {report.single_count} simples, {report.pair_count} combos")

        # 2) Un lot de 4 repas fins
        job_id = 42
        engine.register_job(job_id, "MealFine", producer="Ines")
        meals = [MealItem(meal_type_id="MealFine") for _ in range(4)]
        engine.process_output(meals[0], job_id, ["Meat_Cow", "RawCorn", "RawPotatoes", "RawBerries"])
        for meal in meals[1:]:
            engine.process_output(meal, job_id, [])
        names = {m.dish_name for m in meals}
        print(f"✔ Lot {job_id} : {len(meals)} repas, noms distincts = {len(names)}")
        for m in meals[:2]:
            print(f"   - {m.dish_name} (par {m.cook_name})")

        # 3) Fin du lot
        engine.release_job(job_id)
        print(f"✔ Lot libéré : get_name = {engine.get_name(job_id)}")

        # 4) Résolutions hors lot
        samples = [
            (["RawPotatoes"], "Simple"),
            (["RawPotatoes", "RawFungus"], "Simple"),
            (["RawRice", "RawFungus"], "Fine"),
            (["Meat_Twisted", "RawCorn"], "Lavish"),
            ([], None),
        ]
        for ingredients, quality in samples:
            info = engine.resolve_ad_hoc(ingredients, quality)
            print(f"   - {ingredients or '∅'} [{quality}] → {info.name}")

        result = SimpleNamespace(
            consistent=len(names) == 1,
            released=engine.get_name(job_id) is None,
        )
        print("\n=== Résumé Smoke Test ===")
        print(f"Nom unique par lot : {result.consistent}")
        print(f"Lot libéré         : {result.released}")
        print("=========================\n")


if __name__ == "__main__":
    main()
