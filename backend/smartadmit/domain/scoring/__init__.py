# Scoring module for SmartAdmit
from smartadmit.domain.scoring.interfaces import (
    StudentProfile,
    CollegeCandidate,
    PopulationStats,
    NormalizedStudent,
    CategoryBreakdown,
    ScoredCollege,
    ScoringStrategy,
)
from smartadmit.domain.scoring.weights import (
    AcademicWeights,
    ProfileWeights,
    FitWeights,
    CategoryWeights,
    WeightVector,
)
from smartadmit.domain.scoring.match_scorer import MatchScorer
from smartadmit.domain.scoring.ranker import CollegePredictor, rank

__all__ = [
    "StudentProfile",
    "CollegeCandidate",
    "PopulationStats",
    "NormalizedStudent",
    "CategoryBreakdown",
    "ScoredCollege",
    "ScoringStrategy",
    "AcademicWeights",
    "ProfileWeights",
    "FitWeights",
    "CategoryWeights",
    "WeightVector",
    "MatchScorer",
    "CollegePredictor",
    "rank",
]
