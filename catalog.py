"""
Static medication catalog

Purpose: known medication names for the autocomplete under the name input.

Input: a typed prefix, e.g. "lis".

Output: up to SUGGESTION_LIMIT catalog names starting with it, in catalog order.

Example: suggest("lis") -> ["Lisinopril"]
"""
from typing import List, Optional, Sequence

import config

COMMON_MEDICATIONS = (
    "Acetaminophen",
    "Albuterol",
    "Alendronate",
    "Allopurinol",
    "Alprazolam",
    "Amiodarone",
    "Amitriptyline",
    "Amlodipine",
    "Amoxicillin",
    "Apixaban",
    "Aripiprazole",
    "Aspirin",
    "Atenolol",
    "Atorvastatin",
    "Azithromycin",
    "Bupropion",
    "Buspirone",
    "Carvedilol",
    "Cephalexin",
    "Cetirizine",
    "Ciprofloxacin",
    "Citalopram",
    "Clonazepam",
    "Clopidogrel",
    "Cyclobenzaprine",
    "Diazepam",
    "Diclofenac",
    "Digoxin",
    "Diltiazem",
    "Doxycycline",
    "Duloxetine",
    "Escitalopram",
    "Esomeprazole",
    "Fluconazole",
    "Fluoxetine",
    "Furosemide",
    "Gabapentin",
    "Glipizide",
    "Hydrochlorothiazide",
    "Hydrocodone",
    "Ibuprofen",
    "Insulin Glargine",
    "Levothyroxine",
    "Lisinopril",
    "Loratadine",
    "Lorazepam",
    "Losartan",
    "Meloxicam",
    "Metformin",
    "Methotrexate",
    "Metoprolol",
    "Montelukast",
    "Naproxen",
    "Nitroglycerin",
    "Omeprazole",
    "Ondansetron",
    "Oxycodone",
    "Pantoprazole",
    "Paroxetine",
    "Prednisone",
    "Pregabalin",
    "Propranolol",
    "Quetiapine",
    "Ramipril",
    "Rivaroxaban",
    "Rosuvastatin",
    "Sertraline",
    "Sildenafil",
    "Simvastatin",
    "Spironolactone",
    "Tamsulosin",
    "Tramadol",
    "Trazodone",
    "Valsartan",
    "Venlafaxine",
    "Verapamil",
    "Warfarin",
    "Zolpidem",
)


def suggest(prefix: str, catalog: Sequence[str] = COMMON_MEDICATIONS, limit: Optional[int] = None) -> List[str]:
    """Case-insensitive prefix match against the catalog, first `limit` hits."""
    if not prefix:
        return []
    if limit is None:
        limit = config.SUGGESTION_LIMIT
    needle = prefix.lower()
    return [name for name in catalog if name.lower().startswith(needle)][:limit]
