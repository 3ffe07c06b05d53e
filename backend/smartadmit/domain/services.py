"""
Recommendation Services

Glue between the HTTP schemas, the scoring engine and external lookups.
Weight configuration errors surface as ValidationError (HTTP 400).
"""

import logging
from typing import Dict, Mapping, Optional

from smartadmit.config.settings import get_settings
from smartadmit.domain.models import (
    MatchSignals,
    PresetsResponse,
    RankedCollegeOut,
    RankRequest,
    RankResponse,
    RecommendationOut,
    RecommendationRequest,
    RecommendationResponse,
)
from smartadmit.domain.scoring.presets import (
    CATEGORY_WEIGHTS,
    WEIGHT_PRESETS,
    get_category_preset,
    get_weight_preset,
)
from smartadmit.domain.scoring.ranker import CollegePredictor
from smartadmit.domain.scoring.weights import PartialWeights
from smartadmit.infrastructure.exceptions import (
    ConfigurationError,
    NotFoundError,
    ValidationError,
)
from smartadmit.infrastructure.services.college_scorecard_service import (
    CollegeScorecardService,
)

logger = logging.getLogger(__name__)


def _merge_weight_trees(
    base: Optional[PartialWeights],
    overrides: Optional[PartialWeights],
) -> Optional[Dict[str, Dict[str, float]]]:
    if not base and not overrides:
        return None
    merged: Dict[str, Dict[str, float]] = {k: dict(v) for k, v in (base or {}).items()}
    for category, factors in (overrides or {}).items():
        merged.setdefault(category, {}).update(factors)
    return merged


def build_predictor(
    weights: Optional[PartialWeights] = None,
    category_weights: Optional[Mapping[str, float]] = None,
    weight_preset: Optional[str] = None,
    category_preset: Optional[str] = None,
) -> CollegePredictor:
    """
    Predictor from optional presets with explicit overrides on top.
    
    Raises:
        ValidationError: unknown preset, category or factor, or a negative or non-finite weight
    """
    try:
        base_weights = get_weight_preset(weight_preset) if weight_preset else None
        base_categories = get_category_preset(category_preset) if category_preset else None
        
        merged_categories = None
        if base_categories or category_weights:
            merged_categories = {**(base_categories or {}), **(category_weights or {})}
        
        return CollegePredictor(
            custom_weights=_merge_weight_trees(base_weights, weights),
            category_weights=merged_categories,
        )
    except ValueError as e:
        raise ValidationError(str(e), details={"field": "weights"}, original_error=e)


def list_presets() -> PresetsResponse:
    return PresetsResponse(weights=WEIGHT_PRESETS, category_weights=CATEGORY_WEIGHTS)


class ScoringService:
    """Scores caller-supplied colleges; no external lookups."""
    
    def rank(self, request: RankRequest) -> RankResponse:
        predictor = build_predictor(
            weights=request.weights,
            category_weights=request.category_weights,
            weight_preset=request.weight_preset,
            category_preset=request.category_preset,
        )
        student = request.student.to_domain()
        colleges = [c.to_domain() for c in request.colleges]
        top_n = request.top_n if request.top_n is not None else get_settings().default_top_n
        
        normalized = predictor.normalize_student_data(student, colleges)
        ranked = predictor.score_normalized(
            normalized, colleges, strategy=request.strategy
        )[:max(0, top_n)]
        
        return RankResponse(
            recommendations=[RankedCollegeOut.from_scored(s) for s in ranked],
            signals=MatchSignals(
                major_alignment=normalized.major_alignment,
                budget_compatibility=normalized.budget_compatibility,
            ),
            strategy=request.strategy,
        )


class RecommendationService:
    """
    Recommendations for the SmartAdmit form.
    
    Looks up the student's universities (or a default list) on the College
    Scorecard API and ranks the ones that resolved.
    """
    
    def __init__(self, scorecard: CollegeScorecardService):
        self._scorecard = scorecard
    
    async def recommend(self, request: RecommendationRequest) -> RecommendationResponse:
        """
        Raises:
            ConfigurationError: Scorecard API key missing
            NotFoundError: none of the colleges could be looked up
            ValidationError: invalid custom weights
        """
        settings = get_settings()
        if not self._scorecard.is_configured:
            raise ConfigurationError(
                "College Scorecard API key not configured",
                missing_keys=["COLLEGE_SCORECARD_API_KEY"],
            )
        
        predictor = build_predictor(
            weights=request.custom_weights,
            category_weights=request.category_weights,
        )
        student = request.to_student_profile()
        names = request.universities or settings.default_colleges
        
        colleges = await self._scorecard.fetch_candidates(
            names,
            intended_major=student.intended_major,
            limit=settings.max_candidate_colleges,
        )
        if not colleges:
            raise NotFoundError("No college data available", resource="colleges")
        
        logger.info(f"Ranking {len(colleges)} of {len(names)} requested colleges")
        ranked = predictor.get_top_colleges(student, colleges, top_n=settings.default_top_n)
        
        return RecommendationResponse(
            recommendations=[
                RecommendationOut(
                    name=s.college.name,
                    match=s.score,
                    breakdown=s.breakdown.to_dict(),
                    location=s.college.location,
                    tuition=s.college.tuition,
                )
                for s in ranked
            ]
        )
