"""
Student Normalizer

Rescales heterogeneous student attributes into comparable [0, 1] features.

Normalization is two-phase: `compute_population_stats` summarizes the
candidate batch, then `normalize_student` applies it. The extracurricular
feature therefore depends on which colleges were passed in.

Missing data always maps to the neutral midpoint 0.5, never 0.
"""

import logging
import statistics
from typing import Sequence

from smartadmit.domain.scoring.interfaces import (
    CollegeCandidate,
    NormalizedStudent,
    PopulationStats,
    StudentProfile,
)
from smartadmit.domain.scoring.factors.fit_factor import majors_contain

logger = logging.getLogger(__name__)

NEUTRAL = 0.5

SAT_RANGE = (400.0, 1600.0)
GPA_RANGE = (0.0, 4.0)
AWARDS_RANGE = (0.0, 10.0)
TESTS_RANGE = (0.0, 5.0)
# Assumed spread of extracurricular z-scores folded back into [0, 1]
Z_SCORE_RANGE = (-2.0, 2.0)

DEFAULT_COLLEGE_EXTRACURRICULARS = 5.0
DEFAULT_MAX_BUDGET = 100000.0


def normalize_bounded(value: float, min_value: float, max_value: float) -> float:
    """Min-max normalization, clamped to [0, 1]. A degenerate range yields 0."""
    if max_value == min_value:
        return 0.0
    scaled = (value - min_value) / (max_value - min_value)
    return max(0.0, min(1.0, scaled))


def normalize_z_score(value: float, mean: float, std_dev: float) -> float:
    if std_dev == 0:
        return 0.0
    return (value - mean) / std_dev


def compute_population_stats(colleges: Sequence[CollegeCandidate]) -> PopulationStats:
    """
    Mean and population standard deviation of college extracurricular averages.
    
    Unknown averages count as 5; non-positive values are dropped.
    """
    counts = [
        c.avg_extracurriculars if c.avg_extracurriculars is not None
        else DEFAULT_COLLEGE_EXTRACURRICULARS
        for c in colleges
    ]
    counts = [c for c in counts if c > 0]
    
    if not counts:
        return PopulationStats()
    
    stats = PopulationStats(
        mean=statistics.fmean(counts),
        std_dev=statistics.pstdev(counts),
        count=len(counts),
    )
    logger.debug(
        "Extracurricular population: n=%d mean=%.3f std=%.3f",
        stats.count, stats.mean, stats.std_dev,
    )
    return stats


def major_alignment_signal(
    intended_major: str,
    colleges: Sequence[CollegeCandidate],
) -> float:
    """
    Batch-level major signal: 1.0 if any candidate offers the major, else 0.5.
    
    Distinct from the per-college major fit used by the scorer.
    """
    if not intended_major:
        return NEUTRAL
    hit = any(majors_contain(c.majors, intended_major) for c in colleges)
    return 1.0 if hit else NEUTRAL


def normalize_student(
    student: StudentProfile,
    stats: PopulationStats,
    major_alignment: float = NEUTRAL,
) -> NormalizedStudent:
    """Build the normalized student view for one scoring batch."""
    sat = normalize_bounded(student.sat_score, *SAT_RANGE) if student.sat_score else None
    cgpa = normalize_bounded(student.cgpa, *GPA_RANGE) if student.cgpa else None
    subject_grades = max(0.0, min(1.0, student.subject_grades or NEUTRAL))
    
    if stats.is_empty:
        extracurriculars = NEUTRAL
    else:
        z = normalize_z_score(len(student.extracurriculars or []), stats.mean, stats.std_dev)
        extracurriculars = normalize_bounded(z, *Z_SCORE_RANGE)
    
    awards = (
        normalize_bounded(student.awards_count, *AWARDS_RANGE)
        if student.awards_count else NEUTRAL
    )
    tests = (
        normalize_bounded(student.standardized_tests_count, *TESTS_RANGE)
        if student.standardized_tests_count else NEUTRAL
    )
    
    min_budget = student.min_budget or 0.0
    max_budget = student.max_budget or DEFAULT_MAX_BUDGET
    budget_compatibility = (
        normalize_bounded(student.budget, min_budget, max_budget)
        if student.budget else NEUTRAL
    )
    
    return NormalizedStudent(
        sat_score=sat,
        cgpa=cgpa,
        subject_grades=subject_grades,
        extracurriculars=extracurriculars,
        awards=awards,
        standardized_tests=tests,
        intended_major=student.intended_major or "",
        location_preference=student.location_preference or "",
        budget=student.budget or 0.0,
        min_budget=min_budget,
        max_budget=max_budget,
        major_alignment=major_alignment,
        budget_compatibility=budget_compatibility,
    )
