"""Pytest fixtures and configuration for PitchForge tests."""

import os
import random
from datetime import datetime, timezone
from typing import Any, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("DEBUG", "false")

from pitchforge.core.config import Settings
from pitchforge.models import CaseStudy, ProjectBrief
from pitchforge.services.pitch_service import PitchService, get_pitch_service


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def sample_brief_data() -> Dict[str, Any]:
    """Raw brief fields as supplied by the record store."""
    return {
        "title": "E-commerce Platform",
        "industry": "Technology",
        "budget": "$50,000 - $100,000",
        "objectives": "user authentication and product catalog",
        "timeline": "3-4 months",
        "client_details": "TechCorp Inc. - Mid-size retailer looking to expand online",
        "submitted_by": "customer@pitchforge.com",
    }


@pytest.fixture
def brief(sample_brief_data) -> ProjectBrief:
    """Technology brief used by most scoring tests."""
    return ProjectBrief(id="brief-1", **sample_brief_data)


@pytest.fixture
def matching_case_study() -> CaseStudy:
    """Case study that matches the sample brief on every sub-score."""
    return CaseStudy(
        id="cs-match",
        title="E-commerce Platform for Retail Chain",
        industry="Technology",
        description="built user authentication and product catalog features",
        tags=["ecommerce"],
        outcome="40% increase in online sales within 6 months",
        budget="$50,000 - $100,000",
        timeline="3-4 months",
    )


@pytest.fixture
def unrelated_case_study() -> CaseStudy:
    """Case study that matches the sample brief on nothing."""
    return CaseStudy(
        id="cs-none",
        title="Healthcare Management System",
        industry="Healthcare",
        description="patient records with appointment scheduling",
        tags=["healthcare", "billing"],
        outcome="Improved patient care efficiency by 35%",
        budget="$500,000 - $1,000,000",
        timeline="12-18 months",
    )


@pytest.fixture
def partial_case_study() -> CaseStudy:
    """Same industry and budget, different timeline, no word overlap (score 55)."""
    return CaseStudy(
        id="cs-partial",
        title="SaaS CRM Integration",
        industry="technology",
        description="seamless integration of multiple crm systems",
        tags=["crm", "integration"],
        outcome="40% improvement in lead conversion",
        budget="$25,000 - $60,000",
        timeline="8-10 months",
    )


@pytest.fixture
def case_studies(matching_case_study, unrelated_case_study, partial_case_study) -> List[CaseStudy]:
    """Small library in deliberately unsorted order."""
    return [unrelated_case_study, partial_case_study, matching_case_study]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(42)


# ===========================================
# Service Fixtures
# ===========================================

@pytest.fixture
def settings() -> Settings:
    return Settings(DEBUG=False)


@pytest.fixture
def service(settings, seeded_rng) -> PitchService:
    """Service backed by fresh in-memory repositories."""
    return PitchService(settings=settings, rng=seeded_rng)


@pytest.fixture
def populated_service(service, sample_brief_data, case_studies) -> PitchService:
    """Service with the sample brief stored as 'brief-1' and the case study library."""
    service.briefs.save(ProjectBrief(id="brief-1", **sample_brief_data))
    for case_study in case_studies:
        service.add_case_study(case_study)
    return service


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client(populated_service) -> Generator[TestClient, None, None]:
    """Test client wired to the populated in-memory service."""
    from pitchforge.main import app

    app.dependency_overrides[get_pitch_service] = lambda: populated_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that go through the HTTP layer"
    )
