"""
Scoring Interfaces for SmartAdmit

Defines the data models exchanged by the college-matching engine.
All models are request-scoped: built per scoring call, never persisted here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class ScoringStrategy(str, Enum):
    """Selectable scoring algorithms."""
    WEIGHTED = "weighted"
    COSINE = "cosine"


@dataclass
class StudentProfile:
    """
    Raw student attributes as collected by the SmartAdmit form.
    
    Zero/None means "not provided"; the normalizer maps those to
    neutral values instead of penalizing the student.
    """
    sat_score: float = 0  # 400-1600, 0 when absent
    cgpa: float = 0.0  # 0.0-4.0 after scale conversion
    subject_grades: Optional[float] = None  # 0.0-1.0 signal
    
    # Engagement signals
    extracurriculars: List[str] = field(default_factory=list)
    awards_count: int = 0
    standardized_tests_count: int = 0
    
    # Fit preferences
    intended_major: str = ""
    location_preference: Optional[str] = None
    budget: Optional[float] = None
    min_budget: float = 0.0
    max_budget: float = 100000.0


@dataclass
class CollegeCandidate:
    """One target school. Names are unique within a scoring call."""
    name: str
    avg_sat: Optional[float] = None
    avg_gpa: Optional[float] = None
    avg_extracurriculars: Optional[float] = None
    majors: Optional[List[str]] = None
    state: Optional[str] = None
    city: Optional[str] = None
    tuition: Optional[float] = None
    
    @property
    def location(self) -> str:
        """Display location, e.g. "Cambridge, MA"."""
        return f"{self.city or ''}, {self.state or ''}".strip()


@dataclass(frozen=True)
class PopulationStats:
    """
    Extracurricular population statistics over one candidate batch.
    
    Used only to z-score the student's activity count.
    """
    mean: float = 0.0
    std_dev: float = 0.0
    count: int = 0
    
    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass(frozen=True)
class NormalizedStudent:
    """
    Student features rescaled to [0, 1].
    
    `sat_score` and `cgpa` stay None when the student did not provide them,
    so per-college matching can fall back to its neutral value.
    """
    sat_score: Optional[float]
    cgpa: Optional[float]
    subject_grades: float
    extracurriculars: float
    awards: float
    standardized_tests: float
    
    intended_major: str = ""
    location_preference: str = ""
    budget: float = 0.0
    min_budget: float = 0.0
    max_budget: float = 100000.0
    
    # Batch-level signals
    major_alignment: float = 0.5
    budget_compatibility: float = 0.5


@dataclass(frozen=True)
class CategoryBreakdown:
    """Per-category sub-scores as 0-100 integers."""
    academic: int
    profile: int
    fit: int
    
    def to_dict(self) -> Dict[str, int]:
        return {
            "academic": self.academic,
            "profile": self.profile,
            "fit": self.fit,
        }


@dataclass(frozen=True)
class ScoredCollege:
    """
    College with its match score.
    
    Final output of the ranker; callers may persist it.
    """
    college: CollegeCandidate
    score: int  # 0-100
    breakdown: CategoryBreakdown
    strategy: ScoringStrategy = ScoringStrategy.WEIGHTED
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "name": self.college.name,
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
        }
