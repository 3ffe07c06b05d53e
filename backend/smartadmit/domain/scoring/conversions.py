"""
Grade scale conversions applied before scoring.
"""

from typing import Optional, Union

GPA_SCALE_MAX = 4.0


def convert_gpa_to_four_scale(
    gpa_score: Optional[Union[str, float]],
    gpa_scale: Optional[str],
) -> float:
    """
    Convert a GPA reported on a "4.0", "100" or 10-point scale to 0-4.0.
    
    Unknown scales are treated as 10-point. Missing score or scale yields 0,
    which the normalizer reads as "not provided".
    """
    if not gpa_score or not gpa_scale:
        return 0.0
    
    score = float(gpa_score)
    if gpa_scale == "4.0":
        cgpa = score
    elif gpa_scale == "100":
        cgpa = score / 100 * GPA_SCALE_MAX
    else:
        cgpa = score / 10 * GPA_SCALE_MAX
    
    return max(0.0, min(GPA_SCALE_MAX, cgpa))
