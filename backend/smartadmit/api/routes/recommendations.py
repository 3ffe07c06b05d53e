"""
Recommendations API Routes

Authenticated SmartAdmit recommendations backed by College Scorecard data.
"""

import logging

from fastapi import APIRouter, Depends

from smartadmit.api.dependencies import get_current_user_id, get_scorecard_service
from smartadmit.domain.models import RecommendationRequest, RecommendationResponse
from smartadmit.domain.services import RecommendationService
from smartadmit.infrastructure.services.college_scorecard_service import (
    CollegeScorecardService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/colleges", tags=["recommendations"])


@router.post("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(
    request: RecommendationRequest,
    user_id: str = Depends(get_current_user_id),
    scorecard: CollegeScorecardService = Depends(get_scorecard_service),
):
    """
    Top 4 college matches for the SmartAdmit form.
    
    Looks up at most MAX_CANDIDATE_COLLEGES universities; colleges the
    Scorecard API cannot resolve are skipped.
    """
    logger.info(f"Recommendations requested by user {user_id}")
    return await RecommendationService(scorecard).recommend(request)
