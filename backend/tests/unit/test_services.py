"""
Unit tests for the scoring and recommendation services.
"""

from unittest.mock import patch

import pytest

from smartadmit.domain.models import RankRequest, RecommendationRequest
from smartadmit.domain.scoring.interfaces import CollegeCandidate
from smartadmit.domain.scoring.ranker import CollegePredictor
from smartadmit.domain.services import (
    RecommendationService,
    ScoringService,
    build_predictor,
)
from smartadmit.infrastructure.exceptions import (
    ConfigurationError,
    NotFoundError,
    ValidationError,
)


class TestBuildPredictor:
    
    def test_preset_with_override(self):
        predictor = build_predictor(
            weights={"academic": {"subject_grades": 0.0}},
            weight_preset="ACADEMIC_FOCUSED",
            category_preset="FIT_HEAVY",
        )
        weights = predictor.get_weights()
        
        assert weights["academic"]["sat_score"] == pytest.approx(0.40 / 0.75)
        assert weights["academic"]["subject_grades"] == 0.0
        assert predictor.scorer.category_weights.fit == pytest.approx(0.40)
    
    def test_category_override_on_preset(self):
        predictor = build_predictor(category_weights={"fit": 0.0}, category_preset="FIT_HEAVY")
        assert predictor.scorer.category_weights.academic == pytest.approx(0.40 / 0.60)
    
    def test_unknown_preset_is_validation_error(self):
        with pytest.raises(ValidationError):
            build_predictor(weight_preset="MYSTERY")
    
    def test_negative_weight_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            build_predictor(category_weights={"academic": -1})
        assert exc_info.value.details["field"] == "weights"
    
    def test_non_finite_weight_is_validation_error(self):
        with pytest.raises(ValidationError, match="finite"):
            build_predictor(weights={"fit": {"budget_compatibility": float("inf")}})


class TestScoringService:
    
    def test_rank_uses_default_top_n(self):
        request = RankRequest(
            student={"intended_major": "History"},
            colleges=[{"name": f"College {i}"} for i in range(6)],
        )
        response = ScoringService().rank(request)
        
        assert len(response.recommendations) == 4
        assert response.signals.major_alignment == 0.5
    
    def test_rank_normalizes_student_once(self):
        request = RankRequest(
            student={"sat_score": 1400, "intended_major": "Biology"},
            colleges=[{"name": "A", "majors": ["Biology"]}, {"name": "B"}],
        )
        with patch.object(
            CollegePredictor,
            "normalize_student_data",
            autospec=True,
            side_effect=CollegePredictor.normalize_student_data,
        ) as normalize:
            response = ScoringService().rank(request)
        
        assert normalize.call_count == 1
        assert response.signals.major_alignment == 1.0
        assert [r.name for r in response.recommendations] == ["A", "B"]
    
    def test_rank_empty_batch(self):
        response = ScoringService().rank(RankRequest(student={}, top_n=3))
        assert response.recommendations == []


class TestRecommendationService:
    
    @pytest.mark.asyncio
    async def test_ranks_fetched_colleges(self, mock_scorecard_service):
        mock_scorecard_service.fetch_candidates.return_value = [
            CollegeCandidate(
                name="Duke University", avg_sat=1530, avg_gpa=3.7,
                avg_extracurriculars=5, majors=["Economics"],
                state="NC", city="Durham", tuition=63000,
            ),
            CollegeCandidate(
                name="Brown University", avg_sat=1510, avg_gpa=3.7,
                avg_extracurriculars=5, majors=["Economics"],
                state="RI", city="Providence", tuition=65000,
            ),
        ]
        request = RecommendationRequest(
            sat_score=1520, gpa_score=3.8, gpa_scale="4.0",
            major="Economics", universities=["Duke", "Brown"], budget=70000,
        )
        
        response = await RecommendationService(mock_scorecard_service).recommend(request)
        
        names = [r.name for r in response.recommendations]
        assert set(names) == {"Duke University", "Brown University"}
        assert response.recommendations[0].location in ("Durham, NC", "Providence, RI")
        
        args, kwargs = mock_scorecard_service.fetch_candidates.call_args
        assert args[0] == ["Duke", "Brown"]
        assert kwargs["intended_major"] == "Economics"
    
    @pytest.mark.asyncio
    async def test_default_college_list(self, mock_scorecard_service):
        mock_scorecard_service.fetch_candidates.return_value = [CollegeCandidate(name="MIT")]
        
        await RecommendationService(mock_scorecard_service).recommend(RecommendationRequest())
        
        args, _ = mock_scorecard_service.fetch_candidates.call_args
        assert "Harvard University" in args[0]
    
    @pytest.mark.asyncio
    async def test_no_colleges_found(self, mock_scorecard_service):
        with pytest.raises(NotFoundError):
            await RecommendationService(mock_scorecard_service).recommend(RecommendationRequest())
    
    @pytest.mark.asyncio
    async def test_missing_api_key(self, mock_scorecard_service):
        mock_scorecard_service.is_configured = False
        
        with pytest.raises(ConfigurationError) as exc_info:
            await RecommendationService(mock_scorecard_service).recommend(RecommendationRequest())
        
        assert exc_info.value.details["missing_keys"] == ["COLLEGE_SCORECARD_API_KEY"]
        mock_scorecard_service.fetch_candidates.assert_not_called()
