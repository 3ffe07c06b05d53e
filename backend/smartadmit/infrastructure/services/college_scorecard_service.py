"""
College Scorecard Service

Fetches official IPEDS data from the College Scorecard API and turns it
into scoring candidates. Lookup failures are non-fatal: the college is
logged and skipped.

API Docs: https://collegescorecard.ed.gov/data/documentation/
"""

import asyncio
import logging
from typing import Optional, Dict, Any, List, Sequence
from dataclasses import dataclass

import httpx

from smartadmit.config.settings import get_settings
from smartadmit.domain.scoring.interfaces import CollegeCandidate
from smartadmit.infrastructure.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

# Statuses meaning the API key itself was rejected
REJECTED_KEY_STATUSES = (401, 403)


@dataclass
class ScorecardCollegeData:
    """Data returned from College Scorecard API."""
    ipeds_id: Optional[int]
    name: str
    state: Optional[str] = None
    city: Optional[str] = None
    sat_average: Optional[float] = None
    tuition_in_state: Optional[float] = None
    tuition_out_of_state: Optional[float] = None
    
    @property
    def tuition(self) -> Optional[float]:
        """Out-of-state tuition, falling back to in-state."""
        return self.tuition_out_of_state or self.tuition_in_state


class CollegeScorecardService:
    """
    Service for fetching college data from the College Scorecard API.
    
    Uses official IPEDS data from the US Department of Education.
    Rate limit: 1000 requests/hour per IP.
    """
    
    BASE_URL = "https://api.data.gov/ed/collegescorecard/v1/schools"
    
    FIELDS = (
        "id",
        "school.name",
        "school.state",
        "school.city",
        "latest.admissions.sat_scores.average.overall",
        "latest.cost.tuition.in_state",
        "latest.cost.tuition.out_of_state",
    )
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.college_scorecard_api_key
        self.timeout = timeout or settings.scorecard_timeout_seconds
        self._transport = transport
        if not self.api_key:
            logger.warning("COLLEGE_SCORECARD_API_KEY not configured")
    
    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
    
    async def search_by_name(
        self,
        name: str,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Optional[ScorecardCollegeData]:
        """
        Search for a college by name.
        
        Returns the first match or None if not found or the request failed.
        """
        if not self.api_key:
            logger.error("[SCORECARD] API key not configured")
            return None
        
        if client is None:
            async with self._client() as own_client:
                return await self._search(own_client, name)
        return await self._search(client, name)
    
    async def _search(
        self,
        client: httpx.AsyncClient,
        name: str,
    ) -> Optional[ScorecardCollegeData]:
        logger.info(f"[SCORECARD] Searching for '{name}'...")
        
        try:
            response = await client.get(
                self.BASE_URL,
                params={
                    "api_key": self.api_key,
                    "school.name": name,
                    "fields": ",".join(self.FIELDS),
                }
            )
            response.raise_for_status()
            results = response.json().get("results", [])
        except httpx.HTTPStatusError as e:
            if e.response.status_code in REJECTED_KEY_STATUSES:
                raise ExternalServiceError(
                    "College Scorecard rejected the API key",
                    service="college_scorecard",
                    status_code=e.response.status_code,
                    original_error=e,
                )
            logger.warning(f"[SCORECARD] HTTP {e.response.status_code} for '{name}'")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"[SCORECARD] Failed to fetch data for '{name}': {e}")
            return None
        
        if not results:
            logger.info(f"[SCORECARD] No results for '{name}'")
            return None
        
        college = self._parse_result(results[0], fallback_name=name)
        logger.info(f"[SCORECARD] Found: {college.name} (IPEDS: {college.ipeds_id})")
        return college
    
    async def fetch_candidates(
        self,
        names: Sequence[str],
        intended_major: str = "",
        limit: Optional[int] = None,
    ) -> List[CollegeCandidate]:
        """
        Look up colleges by name and build scoring candidates.
        
        Args:
            names: College names as typed by the student
            intended_major: Used as the candidate's major list, since the
                Scorecard fields requested here carry no program data
            limit: Maximum number of lookups (defaults to MAX_CANDIDATE_COLLEGES)
            
        Returns:
            Candidates for every name that resolved, in input order
        """
        limit = limit or get_settings().max_candidate_colleges
        names = list(names)[:limit]
        
        async with self._client() as client:
            results = await asyncio.gather(
                *(self.search_by_name(name, client=client) for name in names)
            )
        
        return [
            self.to_candidate(data, intended_major)
            for data in results
            if data is not None
        ]
    
    def to_candidate(
        self,
        data: ScorecardCollegeData,
        intended_major: str = "",
    ) -> CollegeCandidate:
        """Convert Scorecard data into a scoring candidate with placeholders."""
        settings = get_settings()
        return CollegeCandidate(
            name=data.name,
            avg_sat=data.sat_average,
            avg_gpa=settings.default_college_avg_gpa,
            avg_extracurriculars=settings.default_college_avg_extracurriculars,
            majors=[intended_major],
            state=data.state,
            city=data.city,
            tuition=data.tuition,
        )
    
    def _parse_result(
        self,
        result: Dict[str, Any],
        fallback_name: str = "",
    ) -> ScorecardCollegeData:
        """Parse API result into ScorecardCollegeData."""
        return ScorecardCollegeData(
            ipeds_id=result.get("id"),
            name=result.get("school.name") or fallback_name,
            state=result.get("school.state"),
            city=result.get("school.city"),
            sat_average=result.get("latest.admissions.sat_scores.average.overall"),
            tuition_in_state=result.get("latest.cost.tuition.in_state"),
            tuition_out_of_state=result.get("latest.cost.tuition.out_of_state"),
        )
