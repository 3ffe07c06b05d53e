"""
Test configuration and fixtures for SmartAdmit.

Provides shared fixtures for unit and integration tests.
"""

import pytest
from unittest.mock import MagicMock, AsyncMock

from fastapi.testclient import TestClient

from smartadmit.domain.scoring.interfaces import CollegeCandidate, StudentProfile


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application."""
    from smartadmit.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_scorecard_service():
    """Mock for CollegeScorecardService."""
    mock = MagicMock()
    mock.is_configured = True
    mock.fetch_candidates = AsyncMock(return_value=[])
    return mock


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def cs_student():
    """Strong CS applicant with a $50k budget and no location preference."""
    return StudentProfile(
        sat_score=1500,
        cgpa=3.9,
        subject_grades=0.7,
        intended_major="Computer Science",
        budget=50000,
    )


@pytest.fixture
def matching_college():
    """College whose averages equal the CS applicant's stats."""
    return CollegeCandidate(
        name="Target University",
        avg_sat=1500,
        avg_gpa=3.9,
        majors=["Computer Science"],
        tuition=45000,
    )


@pytest.fixture
def candidate_colleges():
    """A small mixed batch of candidates."""
    return [
        CollegeCandidate(
            name="Stanford University",
            avg_sat=1540,
            avg_gpa=3.96,
            avg_extracurriculars=8,
            majors=["Computer Science", "Economics"],
            state="CA",
            city="Stanford",
            tuition=62000,
        ),
        CollegeCandidate(
            name="Arizona State University",
            avg_sat=1230,
            avg_gpa=3.5,
            avg_extracurriculars=4,
            majors=["Computer Science", "Business"],
            state="AZ",
            city="Tempe",
            tuition=32000,
        ),
        CollegeCandidate(
            name="Juilliard",
            avg_sat=None,
            avg_gpa=3.5,
            avg_extracurriculars=6,
            majors=["Dance", "Music"],
            state="NY",
            city="New York",
            tuition=55000,
        ),
        CollegeCandidate(
            name="Georgia Tech",
            avg_sat=1450,
            avg_gpa=3.9,
            avg_extracurriculars=5,
            majors=["Computer Science", "Aerospace Engineering"],
            state="GA",
            city="Atlanta",
            tuition=33000,
        ),
        CollegeCandidate(
            name="Unknown College",
        ),
    ]


@pytest.fixture
def scenario_rank_payload():
    """Rank request body for the CS applicant against a matching college."""
    return {
        "student": {
            "sat_score": 1500,
            "cgpa": 3.9,
            "subject_grades": 0.7,
            "intended_major": "Computer Science",
            "budget": 50000,
        },
        "colleges": [
            {
                "name": "Target University",
                "avg_sat": 1500,
                "avg_gpa": 3.9,
                "majors": ["Computer Science"],
                "tuition": 45000,
            }
        ],
        "weight_preset": "HOLISTIC",
        "category_preset": "BALANCED",
    }
