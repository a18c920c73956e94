"""API Routes - Briefs, case study recommendations and pitch workflow."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, EmailStr

from pitchforge.models import (
    CaseStudy,
    CaseStudyStats,
    PitchAction,
    PitchStats,
    ProjectBrief,
    ScoredCaseStudy,
    SolutionPitch,
)
from pitchforge.services.pitch_service import PitchService, get_pitch_service

logger = logging.getLogger(__name__)

router = APIRouter()


class PitchGenerateRequest(BaseModel):
    """Request body for pitch generation."""
    created_by: Optional[EmailStr] = None


class PitchEditRequest(BaseModel):
    """Request body for saving an edited pitch."""
    title: Optional[str] = None
    content: Optional[str] = None


class PitchActionRequest(BaseModel):
    """Request body for a lifecycle action."""
    feedback: Optional[str] = None


class HealthResponse(BaseModel):
    """Response for the health check."""
    status: str
    case_studies: int
    pitches: int


# ===========================================
# Health
# ===========================================

@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health(service: PitchService = Depends(get_pitch_service)) -> HealthResponse:
    """Health check with record counts."""
    return HealthResponse(
        status="healthy",
        case_studies=len(service.list_case_studies()),
        pitches=len(service.list_pitches()),
    )


# ===========================================
# Briefs
# ===========================================

@router.post("/briefs", response_model=ProjectBrief, status_code=201, tags=["briefs"])
async def create_brief(
    payload: Dict[str, Any] = Body(...),
    service: PitchService = Depends(get_pitch_service),
) -> ProjectBrief:
    """Store a structured project brief. Missing fields return 400."""
    return service.create_brief(payload)


@router.get("/briefs/{brief_id}", response_model=ProjectBrief, tags=["briefs"])
async def get_brief(brief_id: str, service: PitchService = Depends(get_pitch_service)) -> ProjectBrief:
    return service.get_brief(brief_id)


@router.get(
    "/briefs/{brief_id}/recommendations",
    response_model=List[ScoredCaseStudy],
    tags=["case-studies"],
    summary="Rank case studies against a brief"
)
async def get_recommendations(
    brief_id: str,
    limit: Optional[int] = Query(None, ge=1, le=50),
    service: PitchService = Depends(get_pitch_service),
) -> List[ScoredCaseStudy]:
    return service.recommend(brief_id, limit=limit)


@router.post(
    "/briefs/{brief_id}/pitches",
    response_model=SolutionPitch,
    status_code=201,
    tags=["pitches"],
    summary="Compose a draft pitch for a brief"
)
async def generate_pitch(
    brief_id: str,
    request: Optional[PitchGenerateRequest] = None,
    service: PitchService = Depends(get_pitch_service),
) -> SolutionPitch:
    created_by = request.created_by if request else None
    return service.generate_pitch(brief_id, created_by=created_by)


# ===========================================
# Case Studies
# ===========================================

@router.post("/case-studies", response_model=CaseStudy, status_code=201, tags=["case-studies"])
async def create_case_study(
    case_study: CaseStudy,
    service: PitchService = Depends(get_pitch_service),
) -> CaseStudy:
    return service.add_case_study(case_study)


@router.get("/case-studies", response_model=List[CaseStudy], tags=["case-studies"])
async def list_case_studies(service: PitchService = Depends(get_pitch_service)) -> List[CaseStudy]:
    return service.list_case_studies()


@router.get("/case-studies/stats", response_model=CaseStudyStats, tags=["case-studies"])
async def get_case_study_stats(
    brief_id: Optional[str] = None,
    service: PitchService = Depends(get_pitch_service),
) -> CaseStudyStats:
    return service.case_study_stats(brief_id)


@router.get("/case-studies/{case_study_id}", response_model=CaseStudy, tags=["case-studies"])
async def get_case_study(case_study_id: str, service: PitchService = Depends(get_pitch_service)) -> CaseStudy:
    return service.case_studies.get(case_study_id)


# ===========================================
# Pitches
# ===========================================

@router.get("/pitches/stats/overview", response_model=PitchStats, tags=["pitches"])
async def get_pitch_stats(service: PitchService = Depends(get_pitch_service)) -> PitchStats:
    return service.pitch_stats()


@router.get("/pitches/{pitch_id}", response_model=SolutionPitch, tags=["pitches"])
async def get_pitch(pitch_id: str, service: PitchService = Depends(get_pitch_service)) -> SolutionPitch:
    return service.get_pitch(pitch_id)


@router.put("/pitches/{pitch_id}", response_model=SolutionPitch, tags=["pitches"])
async def edit_pitch(
    pitch_id: str,
    request: PitchEditRequest,
    service: PitchService = Depends(get_pitch_service),
) -> SolutionPitch:
    """Save an edited title and/or content as the next version."""
    return service.edit_pitch(pitch_id, title=request.title, content=request.content)


@router.get("/pitches/{pitch_id}/export", response_class=HTMLResponse, tags=["pitches"])
async def export_pitch(pitch_id: str, service: PitchService = Depends(get_pitch_service)) -> HTMLResponse:
    return HTMLResponse(service.export_pitch(pitch_id))


@router.post("/pitches/{pitch_id}/{action}", response_model=SolutionPitch, tags=["pitches"])
async def transition_pitch(
    pitch_id: str,
    action: PitchAction,
    request: Optional[PitchActionRequest] = None,
    service: PitchService = Depends(get_pitch_service),
) -> SolutionPitch:
    """Apply submit, approve, reject or revise. Illegal transitions return 400."""
    feedback = request.feedback if request else None
    logger.info(f"Pitch {pitch_id} action requested: {action.value}")
    return service.transition_pitch(pitch_id, action, feedback=feedback)
