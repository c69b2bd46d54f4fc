"""Assessment endpoints."""

import structlog
from fastapi import APIRouter, status

from api.exceptions import AnalysisError
from api.schemas import ErrorResponse
from api.schemas.assessment import AssessmentRequest, AssessmentResponse
from assessment.exceptions import AnalysisFailedError
from assessment.tasks.assess import analyze_website

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/assessments", tags=["Assessments"])


@router.post(
    "",
    response_model=AssessmentResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    },
)
async def create_assessment(request: AssessmentRequest) -> AssessmentResponse:
    """
    Assess a website for AI search readiness.

    Runs synchronously: fetches the homepage and a handful of priority
    pages, gathers external signals and returns the scored report.
    """
    try:
        report = await analyze_website(request.url)
    except AnalysisFailedError as e:
        logger.warning("assessment_rejected", url=e.url, reason=e.reason)
        raise AnalysisError(e.url) from e

    return AssessmentResponse.model_validate(report.to_dict())
