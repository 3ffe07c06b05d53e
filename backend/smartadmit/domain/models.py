"""
Domain Models for SmartAdmit

Pydantic request/response schemas for the scoring API.
Each request model converts itself into the scoring engine's dataclasses.
"""

from typing import Dict, List, Optional, Any
from pydantic import BaseModel, Field, field_validator

from smartadmit.domain.scoring.conversions import convert_gpa_to_four_scale
from smartadmit.domain.scoring.interfaces import (
    CollegeCandidate,
    ScoredCollege,
    ScoringStrategy,
    StudentProfile,
)

# Placeholders the recommendations form does not collect
SUBJECT_GRADES_PLACEHOLDER = 0.7
STANDARDIZED_TESTS_PLACEHOLDER = 1
DEFAULT_BUDGET = 50000.0
DEFAULT_MIN_BUDGET = 0.0
DEFAULT_MAX_BUDGET = 100000.0


class StudentProfileIn(BaseModel):
    """Student attributes for direct scoring."""
    sat_score: float = Field(0, ge=0, le=1600, description="SAT total, 0 when absent")
    cgpa: float = Field(0.0, ge=0.0, le=4.0, description="GPA on 4.0 scale")
    subject_grades: Optional[float] = Field(None, ge=0.0, le=1.0)
    extracurriculars: List[str] = Field(default_factory=list)
    awards_count: int = Field(0, ge=0)
    standardized_tests_count: int = Field(0, ge=0)
    intended_major: str = Field("", max_length=100)
    location_preference: Optional[str] = None
    budget: Optional[float] = Field(None, ge=0)
    min_budget: float = Field(DEFAULT_MIN_BUDGET, ge=0)
    max_budget: float = Field(DEFAULT_MAX_BUDGET, ge=0)

    def to_domain(self) -> StudentProfile:
        return StudentProfile(**self.model_dump())


class CollegeCandidateIn(BaseModel):
    """One candidate college for direct scoring."""
    name: str = Field(..., min_length=1)
    avg_sat: Optional[float] = Field(None, ge=0, le=1600)
    avg_gpa: Optional[float] = Field(None, ge=0.0)
    avg_extracurriculars: Optional[float] = Field(None, ge=0)
    majors: Optional[List[str]] = None
    state: Optional[str] = None
    city: Optional[str] = None
    tuition: Optional[float] = Field(None, ge=0)

    def to_domain(self) -> CollegeCandidate:
        return CollegeCandidate(**self.model_dump())


class RankRequest(BaseModel):
    """
    Rank supplied colleges for a student.
    
    A named preset, when given, is the base; explicit weights are merged
    on top of it.
    """
    student: StudentProfileIn
    colleges: List[CollegeCandidateIn] = Field(default_factory=list)
    weights: Optional[Dict[str, Dict[str, float]]] = None
    category_weights: Optional[Dict[str, float]] = None
    weight_preset: Optional[str] = None
    category_preset: Optional[str] = None
    top_n: Optional[int] = Field(None, ge=0)
    strategy: ScoringStrategy = ScoringStrategy.WEIGHTED

    @field_validator("colleges")
    @classmethod
    def validate_unique_names(cls, v: List[CollegeCandidateIn]) -> List[CollegeCandidateIn]:
        names = [c.name for c in v]
        if len(names) != len(set(names)):
            raise ValueError("College names must be unique within a request")
        return v


class BreakdownOut(BaseModel):
    academic: int
    profile: int
    fit: int


class RankedCollegeOut(BaseModel):
    name: str
    score: int
    breakdown: BreakdownOut

    @classmethod
    def from_scored(cls, scored: ScoredCollege) -> "RankedCollegeOut":
        return cls(**scored.to_dict())


class MatchSignals(BaseModel):
    """Batch-level signals from student normalization."""
    major_alignment: float
    budget_compatibility: float


class RankResponse(BaseModel):
    recommendations: List[RankedCollegeOut]
    signals: MatchSignals
    strategy: ScoringStrategy


class RecommendationRequest(BaseModel):
    """SmartAdmit form payload for the external-data recommendations flow."""
    sat_score: Optional[int] = Field(None, ge=0, le=1600)
    gpa_score: Optional[float] = Field(None, ge=0)
    gpa_scale: Optional[str] = None
    major: Optional[str] = None
    universities: List[str] = Field(default_factory=list)
    activities: List[str] = Field(default_factory=list)
    detailed_activities: List[Any] = Field(default_factory=list)
    budget: Optional[float] = Field(None, ge=0)
    custom_weights: Optional[Dict[str, Dict[str, float]]] = None
    category_weights: Optional[Dict[str, float]] = None

    def to_student_profile(self) -> StudentProfile:
        """Build the scoring profile, filling fields the form does not collect."""
        return StudentProfile(
            sat_score=self.sat_score or 0,
            cgpa=convert_gpa_to_four_scale(self.gpa_score, self.gpa_scale),
            subject_grades=SUBJECT_GRADES_PLACEHOLDER,
            extracurriculars=list(self.activities),
            awards_count=len(self.detailed_activities),
            standardized_tests_count=STANDARDIZED_TESTS_PLACEHOLDER,
            intended_major=self.major or "",
            budget=self.budget or DEFAULT_BUDGET,
            min_budget=DEFAULT_MIN_BUDGET,
            max_budget=DEFAULT_MAX_BUDGET,
        )


class RecommendationOut(BaseModel):
    name: str
    match: int
    breakdown: BreakdownOut
    location: str
    tuition: Optional[float] = None


class RecommendationResponse(BaseModel):
    recommendations: List[RecommendationOut]


class PresetsResponse(BaseModel):
    weights: Dict[str, Dict[str, Dict[str, float]]]
    category_weights: Dict[str, Dict[str, float]]
