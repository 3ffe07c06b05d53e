# Per-college match factors
from smartadmit.domain.scoring.factors.academic_fit import sat_match, gpa_match
from smartadmit.domain.scoring.factors.fit_factor import (
    majors_contain,
    per_college_major_fit,
    location_match,
)
from smartadmit.domain.scoring.factors.financial_fit import budget_fit

__all__ = [
    "sat_match",
    "gpa_match",
    "majors_contain",
    "per_college_major_fit",
    "location_match",
    "budget_fit",
]
