"""
Scoring API Routes

Public endpoints for ranking caller-supplied colleges and listing
weight presets. Pure computation, no external lookups.
"""

from fastapi import APIRouter

from smartadmit.domain.models import PresetsResponse, RankRequest, RankResponse
from smartadmit.domain.services import ScoringService, list_presets


router = APIRouter(prefix="/api/scoring", tags=["scoring"])


@router.get("/presets", response_model=PresetsResponse)
async def get_presets():
    """Named factor-weight and category-weight presets."""
    return list_presets()


@router.post("/rank", response_model=RankResponse)
async def rank_colleges(request: RankRequest):
    """
    Rank the supplied colleges for a student.
    
    Returns the top N (default 4) by descending match score; ties keep
    their request order. An empty college list yields no recommendations.
    """
    return ScoringService().rank(request)
