"""
Fit Factors

Major and location fit between a student and one college.
"""

from typing import Iterable, Optional

from smartadmit.domain.scoring.interfaces import CollegeCandidate, NormalizedStudent

NEUTRAL = 0.5
MAJOR_MISSING = 0.3


def majors_contain(majors: Optional[Iterable[str]], intended_major: str) -> bool:
    """Case-insensitive substring match of the intended major in a major list."""
    needle = intended_major.lower()
    return any(needle in m.lower() for m in (majors or []))


def per_college_major_fit(college: CollegeCandidate, student: NormalizedStudent) -> float:
    """
    1.0 if this college offers the intended major, 0.3 if it does not.
    
    Neutral 0.5 when the student has no major or the college publishes no
    major list at all (an empty list counts as "does not offer").
    """
    if not student.intended_major or college.majors is None:
        return NEUTRAL
    return 1.0 if majors_contain(college.majors, student.intended_major) else MAJOR_MISSING


def location_match(college: CollegeCandidate, student: NormalizedStudent) -> float:
    """1.0 when the preferred location equals the college's state, else 0.5."""
    if not student.location_preference or not college.state:
        return NEUTRAL
    
    preference = student.location_preference.strip().lower()
    state = college.state.strip().lower()
    return 1.0 if preference == state else NEUTRAL
