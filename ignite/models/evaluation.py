"""Evaluation lifecycle state and API request/response models.

EvaluationState is a tagged union discriminated by ``status``. Every snapshot
is immutable, so subscribers can never observe a half-updated state.

Dependencies: pydantic, evaluation schema
System role: Lifecycle data model shared by orchestrator and API layer
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ignite.core.evaluation_agent.agent.evaluation_schema import (
    AnalysisResult,
    HeroImage,
)

EVALUATION_FAILED_MESSAGE = "Failed to evaluate the idea. Please try again."


class EvaluationStatus(str, Enum):
    """Lifecycle status of the orchestrator."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class _StateSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class IdleState(_StateSnapshot):
    """No evaluation has run, or the last one was cleared."""

    status: Literal[EvaluationStatus.IDLE] = EvaluationStatus.IDLE


class LoadingState(_StateSnapshot):
    """An evaluation is in flight."""

    status: Literal[EvaluationStatus.LOADING] = EvaluationStatus.LOADING


class SuccessState(_StateSnapshot):
    """Validated analysis plus an optional hero image."""

    status: Literal[EvaluationStatus.SUCCESS] = EvaluationStatus.SUCCESS
    result: AnalysisResult
    hero_image: HeroImage | None = None


class ErrorState(_StateSnapshot):
    """The analysis could not be produced."""

    status: Literal[EvaluationStatus.ERROR] = EvaluationStatus.ERROR
    message: str = EVALUATION_FAILED_MESSAGE


EvaluationState = Annotated[
    Union[IdleState, LoadingState, SuccessState, ErrorState],
    Field(discriminator="status"),
]


class EvaluationRequest(BaseModel):
    """Request to evaluate a business idea.

    Whitespace-only ideas are accepted here and ignored by the orchestrator.
    """

    idea: str = Field(description="Free-text business idea")


def state_to_dict(state: EvaluationState) -> dict[str, Any]:
    """Serialize a snapshot the same way the HTTP API does (camelCase analysis)."""
    return state.model_dump(mode="json", by_alias=True)
