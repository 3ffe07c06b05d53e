"""
Weight Presets

Predefined weight trees for different admission philosophies.
"""

import copy
from typing import Dict

# Emphasizes SAT, GPA, and academic performance
ACADEMIC_FOCUSED_WEIGHTS: Dict[str, Dict[str, float]] = {
    "academic": {
        "sat_score": 0.40,
        "cgpa": 0.35,
        "subject_grades": 0.25,
    },
    "profile": {
        "extracurriculars": 0.05,
        "awards": 0.03,
        "standardized_tests": 0.02,
    },
    "fit": {
        "major_alignment": 0.05,
        "location_match": 0.02,
        "budget_compatibility": 0.03,
    },
}

# Balanced approach considering all factors
HOLISTIC_WEIGHTS: Dict[str, Dict[str, float]] = {
    "academic": {
        "sat_score": 0.25,
        "cgpa": 0.20,
        "subject_grades": 0.15,
    },
    "profile": {
        "extracurriculars": 0.10,
        "awards": 0.08,
        "standardized_tests": 0.07,
    },
    "fit": {
        "major_alignment": 0.08,
        "location_match": 0.04,
        "budget_compatibility": 0.03,
    },
}

# Emphasizes extracurriculars, awards, and activities
PROFILE_FOCUSED_WEIGHTS: Dict[str, Dict[str, float]] = {
    "academic": {
        "sat_score": 0.15,
        "cgpa": 0.15,
        "subject_grades": 0.10,
    },
    "profile": {
        "extracurriculars": 0.20,
        "awards": 0.15,
        "standardized_tests": 0.10,
    },
    "fit": {
        "major_alignment": 0.10,
        "location_match": 0.03,
        "budget_compatibility": 0.02,
    },
}

# Emphasizes major alignment, location, and budget
FIT_FOCUSED_WEIGHTS: Dict[str, Dict[str, float]] = {
    "academic": {
        "sat_score": 0.15,
        "cgpa": 0.15,
        "subject_grades": 0.10,
    },
    "profile": {
        "extracurriculars": 0.08,
        "awards": 0.05,
        "standardized_tests": 0.05,
    },
    "fit": {
        "major_alignment": 0.20,
        "location_match": 0.12,
        "budget_compatibility": 0.10,
    },
}

WEIGHT_PRESETS: Dict[str, Dict[str, Dict[str, float]]] = {
    "ACADEMIC_FOCUSED": ACADEMIC_FOCUSED_WEIGHTS,
    "HOLISTIC": HOLISTIC_WEIGHTS,
    "PROFILE_FOCUSED": PROFILE_FOCUSED_WEIGHTS,
    "FIT_FOCUSED": FIT_FOCUSED_WEIGHTS,
}

CATEGORY_WEIGHTS: Dict[str, Dict[str, float]] = {
    "ACADEMIC_HEAVY": {"academic": 0.70, "profile": 0.20, "fit": 0.10},
    "BALANCED": {"academic": 0.60, "profile": 0.25, "fit": 0.15},
    "PROFILE_HEAVY": {"academic": 0.40, "profile": 0.40, "fit": 0.20},
    "FIT_HEAVY": {"academic": 0.40, "profile": 0.20, "fit": 0.40},
}


def _lookup(table: Dict[str, dict], name: str, kind: str) -> dict:
    key = name.strip().upper().replace("-", "_")
    if key not in table:
        raise ValueError(
            f"Unknown {kind} preset '{name}'. Available: {', '.join(table)}"
        )
    return copy.deepcopy(table[key])


def get_weight_preset(name: str) -> Dict[str, Dict[str, float]]:
    """Return a copy of a factor weight preset by name (case-insensitive)."""
    return _lookup(WEIGHT_PRESETS, name, "weight")


def get_category_preset(name: str) -> Dict[str, float]:
    """Return a copy of a category weight preset by name (case-insensitive)."""
    return _lookup(CATEGORY_WEIGHTS, name, "category weight")
