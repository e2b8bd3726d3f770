"""Idea evaluation endpoints.

Routes:
- GET /evaluations/state - Current evaluation state snapshot
- POST /evaluations - Start evaluating an idea in the background
- POST /evaluations/reset - Return a finished evaluation to idle

Dependencies: ignite.application.services.evaluation_orchestrator
System role: Idea evaluation HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ignite.api.deps import get_evaluation_orchestrator
from ignite.application.services import EvaluationOrchestrator
from ignite.core.evaluation_agent.agent.analysis_prompt import is_submittable
from ignite.models.evaluation import EvaluationRequest, state_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/evaluations", tags=["evaluations"])

IN_PROGRESS_DETAIL = "An evaluation is already in progress"

# Response bodies are state_to_dict payloads, identical to WebSocket state events.


@router.get("/state", response_model=None)
async def get_evaluation_state(
    orchestrator: EvaluationOrchestrator = Depends(get_evaluation_orchestrator),
) -> dict[str, Any]:
    """Return the current lifecycle state (idle, loading, success or error)."""
    return state_to_dict(orchestrator.state)


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_202_ACCEPTED,
)
async def submit_evaluation(
    request: EvaluationRequest,
    response: Response,
    orchestrator: EvaluationOrchestrator = Depends(get_evaluation_orchestrator),
) -> dict[str, Any]:
    """Start evaluating a business idea.

    The evaluation runs in the background; poll GET /evaluations/state or
    subscribe to WS /ws/evaluations for the outcome.

    Response:
    - 202 with the loading snapshot when the evaluation started
    - 200 with the unchanged state when the idea is empty or whitespace

    Raises:
        HTTPException(409): Another evaluation is still loading
    """
    if not is_submittable(request.idea):
        logger.info(f"{__name__}:submit_evaluation - Empty idea ignored")
        response.status_code = status.HTTP_200_OK
        return state_to_dict(orchestrator.state)

    task = orchestrator.start(request.idea)
    if task is None:
        logger.warning(f"{__name__}:submit_evaluation - Rejected while loading")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=IN_PROGRESS_DETAIL)

    return state_to_dict(orchestrator.state)


@router.post("/reset", response_model=None)
async def reset_evaluation(
    orchestrator: EvaluationOrchestrator = Depends(get_evaluation_orchestrator),
) -> dict[str, Any]:
    """Clear a finished evaluation and return to idle.

    Raises:
        HTTPException(409): An evaluation is still loading
    """
    if orchestrator.is_loading:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=IN_PROGRESS_DETAIL)
    return state_to_dict(orchestrator.reset())
