"""
College Ranker

Scores every candidate college for one student and returns the top N.
"""

import logging
from typing import List, Mapping, Optional, Sequence, Union

from smartadmit.domain.scoring.interfaces import (
    CollegeCandidate,
    NormalizedStudent,
    ScoredCollege,
    ScoringStrategy,
    StudentProfile,
)
from smartadmit.domain.scoring.match_scorer import MatchScorer
from smartadmit.domain.scoring.normalizer import (
    compute_population_stats,
    major_alignment_signal,
    normalize_student,
)
from smartadmit.domain.scoring.weights import (
    CategoryWeights,
    PartialWeights,
    WeightVector,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 4


class CollegePredictor:
    """
    College matching engine: normalize, score, rank.
    
    Pure and request-scoped. Each call builds its own normalized student
    view from its own college list; nothing is cached between calls.
    """
    
    def __init__(
        self,
        custom_weights: Optional[PartialWeights] = None,
        category_weights: Optional[Mapping[str, float]] = None,
    ):
        self._scorer = MatchScorer(
            weights=WeightVector.from_overrides(custom_weights),
            category_weights=CategoryWeights.from_overrides(category_weights),
        )
    
    @property
    def scorer(self) -> MatchScorer:
        return self._scorer
    
    def get_weights(self):
        """Copy of the normalized factor weights."""
        return self._scorer.get_weights()
    
    def with_weights(self, overrides: Optional[PartialWeights]) -> "CollegePredictor":
        """New predictor with overrides merged onto the current weights."""
        updated = self._scorer.weights.with_updates(overrides)
        return CollegePredictor(
            custom_weights=updated.as_dict(),
            category_weights=self._scorer.category_weights.as_dict(),
        )
    
    def normalize_student_data(
        self,
        student: StudentProfile,
        colleges: Sequence[CollegeCandidate],
    ) -> NormalizedStudent:
        """Normalize a student against this batch of candidate colleges."""
        stats = compute_population_stats(colleges)
        alignment = major_alignment_signal(student.intended_major, colleges)
        return normalize_student(student, stats, major_alignment=alignment)
    
    def score_colleges(
        self,
        student: StudentProfile,
        colleges: Sequence[CollegeCandidate],
        strategy: Union[ScoringStrategy, str] = ScoringStrategy.WEIGHTED,
    ) -> List[ScoredCollege]:
        """
        Score all colleges, sorted by descending score.
        
        Ties keep their input order.
        """
        normalized = self.normalize_student_data(student, colleges)
        return self.score_normalized(normalized, colleges, strategy)
    
    def score_normalized(
        self,
        student: NormalizedStudent,
        colleges: Sequence[CollegeCandidate],
        strategy: Union[ScoringStrategy, str] = ScoringStrategy.WEIGHTED,
    ) -> List[ScoredCollege]:
        """Score colleges for a student already normalized against this batch."""
        strategy = ScoringStrategy(strategy)
        scored = [self._scorer.score(c, student, strategy) for c in colleges]
        
        logger.debug("Scored %d colleges with %s strategy", len(scored), strategy.value)
        return sorted(scored, key=lambda s: s.score, reverse=True)
    
    def get_top_colleges(
        self,
        student: StudentProfile,
        colleges: Sequence[CollegeCandidate],
        top_n: int = DEFAULT_TOP_N,
        strategy: Union[ScoringStrategy, str] = ScoringStrategy.WEIGHTED,
    ) -> List[ScoredCollege]:
        """Top N colleges for the student."""
        return self.score_colleges(student, colleges, strategy)[:max(0, top_n)]


def rank(
    student: StudentProfile,
    colleges: Sequence[CollegeCandidate],
    top_n: int = DEFAULT_TOP_N,
    weights: Optional[PartialWeights] = None,
    category_weights: Optional[Mapping[str, float]] = None,
    strategy: Union[ScoringStrategy, str] = ScoringStrategy.WEIGHTED,
) -> List[ScoredCollege]:
    """
    Rank colleges for a student.
    
    Args:
        student: Raw student profile
        colleges: Candidate colleges (names unique within the call)
        top_n: Number of results to keep
        weights: Partial factor weight overrides
        category_weights: Partial category weight overrides
        strategy: "weighted" (default) or "cosine"
        
    Returns:
        Top N ScoredCollege sorted by descending score
    """
    predictor = CollegePredictor(weights, category_weights)
    return predictor.get_top_colleges(student, colleges, top_n=top_n, strategy=strategy)
