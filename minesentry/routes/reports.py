"""
Report endpoints - API routes for community report submission, retrieval
and vote updates.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
import logging

from minesentry.dependencies import get_storage, resolve_identity
from minesentry.models.report import CommunityReport
from minesentry.models.validation import InputValidationError, validate_report_input, validate_vote_input
from minesentry.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("", response_model=List[CommunityReport])
async def list_reports(storage: MemoryStorage = Depends(get_storage)):
    """All community reports, most recent first."""
    try:
        return storage.get_reports()
    except Exception as e:
        logger.error(f"❌ GET /api/reports failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch reports",
        )


@router.get("/{report_id}", response_model=CommunityReport)
async def get_report(report_id: str, storage: MemoryStorage = Depends(get_storage)):
    try:
        report = storage.get_report(report_id)
    except Exception as e:
        logger.error(f"❌ GET /api/reports/{report_id} failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch report",
        )

    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")
    return report


@router.post("", response_model=CommunityReport, status_code=status.HTTP_201_CREATED)
async def submit_report(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    storage: MemoryStorage = Depends(get_storage),
):
    """
    Submit a new community report.

    This endpoint:
    1. Validates the report body (location, description, category)
    2. Attributes it to the caller, or to the anonymous user
    3. Stores it with a server-generated id and timestamp

    Returns the created report.
    """
    try:
        report_data = validate_report_input(payload)
        user_id, user_name = resolve_identity(payload, request)

        report = storage.create_report(report_data, user_id, user_name)
        logger.info(f"✅ Report created: {report.id} ({report.category.value}) by {user_id}")
        return report

    except (HTTPException, InputValidationError):
        raise
    except Exception as e:
        logger.error(f"❌ POST /api/reports - Report creation failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create report",
        )


@router.patch("/{report_id}/vote")
async def update_votes(
    report_id: str,
    payload: Dict[str, Any] = Body(...),
    storage: MemoryStorage = Depends(get_storage),
):
    """
    Overwrite the validation vote count of a report.
    Unknown report ids are accepted and ignored.
    """
    try:
        vote = validate_vote_input(payload)
        storage.update_report_votes(report_id, vote.votes)
        return {"success": True}

    except (HTTPException, InputValidationError):
        raise
    except Exception as e:
        logger.error(f"❌ PATCH /api/reports/{report_id}/vote failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update votes",
        )
