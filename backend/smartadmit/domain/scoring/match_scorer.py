"""
Match Scorer

Scores one (student, college) pair into a 0-100 match percentage.

Two strategies share the same per-college factors:
- weighted: per-category weighted dot products combined by category weights
- cosine: cosine similarity between a student vector and a college vector
"""

from typing import Dict, List, Optional, Tuple

from smartadmit.domain.scoring.interfaces import (
    CategoryBreakdown,
    CollegeCandidate,
    NormalizedStudent,
    ScoredCollege,
    ScoringStrategy,
)
from smartadmit.domain.scoring.factors import (
    budget_fit,
    gpa_match,
    location_match,
    per_college_major_fit,
    sat_match,
)
from smartadmit.domain.scoring.vectors import (
    cosine_similarity,
    to_percentage,
    weighted_dot_product,
)
from smartadmit.domain.scoring.weights import CategoryWeights, WeightVector

# Subject-grade entry of the cosine college vector
COSINE_SUBJECT_GRADES_BASELINE = 0.7


class MatchScorer:
    """
    College match scoring engine.
    
    Holds a normalized weight snapshot taken at construction; scoring
    never mutates it, so one scorer can serve a whole ranking call.
    """
    
    def __init__(
        self,
        weights: Optional[WeightVector] = None,
        category_weights: Optional[CategoryWeights] = None,
    ):
        self._weights = (weights or WeightVector()).normalized()
        self._category_weights = (category_weights or CategoryWeights()).normalized()
    
    @property
    def weights(self) -> WeightVector:
        return self._weights
    
    @property
    def category_weights(self) -> CategoryWeights:
        return self._category_weights
    
    def get_weights(self) -> Dict[str, Dict[str, float]]:
        """Copy of the factor weights for inspection."""
        return self._weights.as_dict()
    
    def score(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
        strategy: ScoringStrategy = ScoringStrategy.WEIGHTED,
    ) -> ScoredCollege:
        """Score a college with the selected strategy."""
        if ScoringStrategy(strategy) is ScoringStrategy.COSINE:
            return self.score_cosine(college, student)
        return self.score_weighted(college, student)
    
    def score_weighted(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> ScoredCollege:
        """
        Weighted dot-product score.
        
        Each category score is the dot product of its factor values with
        its factor weights; the total combines them by category weight.
        Every factor is in [0, 1] and both weight levels sum to 1, so the
        total stays within [0, 1].
        """
        academic, profile, fit = self._category_scores(college, student)
        
        cw = self._category_weights
        total = cw.academic * academic + cw.profile * profile + cw.fit * fit
        
        return ScoredCollege(
            college=college,
            score=to_percentage(total),
            breakdown=self._breakdown(academic, profile, fit),
            strategy=ScoringStrategy.WEIGHTED,
        )
    
    def score_cosine(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> ScoredCollege:
        """
        Cosine-similarity score over 9-dimensional feature vectors.
        
        The student vector carries the student's normalized academics while
        the college vector carries per-college matches in the same slots, so
        the two vectors are not the same quantity seen from both sides.
        The breakdown is the weighted category breakdown.
        """
        similarity = cosine_similarity(
            self.student_vector(college, student),
            self.college_vector(college, student),
        )
        academic, profile, fit = self._category_scores(college, student)
        
        return ScoredCollege(
            college=college,
            score=to_percentage(similarity),
            breakdown=self._breakdown(academic, profile, fit),
            strategy=ScoringStrategy.COSINE,
        )
    
    def student_vector(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> List[float]:
        return [
            student.sat_score or 0.0,
            student.cgpa or 0.0,
            student.subject_grades,
            student.extracurriculars,
            student.awards,
            student.standardized_tests,
            *self._fit_values(college, student),
        ]
    
    def college_vector(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> List[float]:
        return [
            sat_match(college, student),
            gpa_match(college, student),
            COSINE_SUBJECT_GRADES_BASELINE,
            *self._profile_values(student),
            *self._fit_values(college, student),
        ]
    
    def _category_scores(
        self,
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> Tuple[float, float, float]:
        academic = weighted_dot_product(
            self._academic_values(college, student),
            self._weights.academic.values(),
        )
        profile = weighted_dot_product(
            self._profile_values(student),
            self._weights.profile.values(),
        )
        fit = weighted_dot_product(
            self._fit_values(college, student),
            self._weights.fit.values(),
        )
        return academic, profile, fit
    
    @staticmethod
    def _academic_values(
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> Tuple[float, float, float]:
        # Order matches AcademicWeights: sat_score, cgpa, subject_grades
        return (
            sat_match(college, student),
            gpa_match(college, student),
            student.subject_grades,
        )
    
    @staticmethod
    def _profile_values(student: NormalizedStudent) -> Tuple[float, float, float]:
        return (
            student.extracurriculars,
            student.awards,
            student.standardized_tests,
        )
    
    @staticmethod
    def _fit_values(
        college: CollegeCandidate,
        student: NormalizedStudent,
    ) -> Tuple[float, float, float]:
        # Order matches FitWeights: major_alignment, location_match, budget_compatibility
        return (
            per_college_major_fit(college, student),
            location_match(college, student),
            budget_fit(college, student),
        )
    
    @staticmethod
    def _breakdown(academic: float, profile: float, fit: float) -> CategoryBreakdown:
        return CategoryBreakdown(
            academic=to_percentage(academic),
            profile=to_percentage(profile),
            fit=to_percentage(fit),
        )
