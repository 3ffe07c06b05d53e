"""
Academic Fit Factors

How close the student's SAT and GPA sit to a college's averages.
Both matches fall off linearly with distance and bottom out at 0:
- SAT: 400 points away scores 0
- GPA: 1.0 grade point away scores 0
"""

from smartadmit.domain.scoring.interfaces import CollegeCandidate, NormalizedStudent

NEUTRAL = 0.5

SAT_MIN = 400.0
SAT_SPAN = 1200.0
SAT_MAX_DIFF = 400.0

GPA_SCALE = 4.0
GPA_MAX_DIFF = 1.0


def sat_match(college: CollegeCandidate, student: NormalizedStudent) -> float:
    """
    SAT proximity to the college average, in [0, 1].
    
    Returns 0.5 when either side lacks an SAT figure.
    """
    if not college.avg_sat or student.sat_score is None:
        return NEUTRAL
    
    student_sat = student.sat_score * SAT_SPAN + SAT_MIN
    diff = abs(student_sat - college.avg_sat)
    return max(0.0, 1 - diff / SAT_MAX_DIFF)


def gpa_match(college: CollegeCandidate, student: NormalizedStudent) -> float:
    """GPA proximity to the college average, in [0, 1]; 0.5 when unknown."""
    if not college.avg_gpa or student.cgpa is None:
        return NEUTRAL
    
    student_gpa = student.cgpa * GPA_SCALE
    diff = abs(student_gpa - college.avg_gpa)
    return max(0.0, 1 - diff / GPA_MAX_DIFF)
