"""
Financial Fit Factor

Affordability of one college against the student's budget.
"""

from smartadmit.domain.scoring.interfaces import CollegeCandidate, NormalizedStudent

NEUTRAL = 0.5
# Tuition this far over budget (as a fraction of budget) scores 0
OVER_BUDGET_TOLERANCE = 0.5


def budget_fit(college: CollegeCandidate, student: NormalizedStudent) -> float:
    """
    1.0 at or under budget, decaying linearly to 0 at 150% of budget.
    
    Returns 0.5 when tuition or budget is unknown.
    """
    if not college.tuition or not student.budget:
        return NEUTRAL
    if college.tuition <= student.budget:
        return 1.0
    
    overage = college.tuition - student.budget
    max_overage = student.budget * OVER_BUDGET_TOLERANCE
    return max(0.0, 1 - overage / max_overage)
