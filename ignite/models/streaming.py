"""
Streaming event schemas for the evaluation state WebSocket.

Server frames are ``{"event": ..., "data": {...}}``. State frames carry the
same payload as GET /evaluations/state.

Dependencies: pydantic, ignite.models.evaluation
System role: Streaming protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ignite.models.evaluation import EvaluationState, state_to_dict


class StreamEventType(str, Enum):
    """Server-to-client event types."""

    STATE = "state"
    PONG = "pong"
    ERROR = "error"


class ClientEventType(str, Enum):
    """Client-to-server event types."""

    EVALUATE = "evaluate"
    RESET = "reset"
    PING = "ping"


class StreamErrorCode(str, Enum):
    """Codes carried by ``error`` frames."""

    INVALID_JSON = "INVALID_JSON"
    MISSING_IDEA = "MISSING_IDEA"
    EVALUATION_IN_PROGRESS = "EVALUATION_IN_PROGRESS"
    UNKNOWN_EVENT = "UNKNOWN_EVENT"


class StreamEvent(BaseModel):
    """
    Server-to-client frame.

    Attributes:
        event: Event type identifier
        data: Event-specific payload
    """

    event: StreamEventType
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def state(cls, state: EvaluationState) -> "StreamEvent":
        """Frame for a published state snapshot."""
        return cls(event=StreamEventType.STATE, data=state_to_dict(state))

    @classmethod
    def error(cls, code: StreamErrorCode, message: str) -> "StreamEvent":
        """Frame reporting a rejected client message."""
        return cls(
            event=StreamEventType.ERROR,
            data={"code": code.value, "message": message},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event.value, "data": self.data}


class ClientEvaluateEvent(BaseModel):
    """
    Payload of a client ``evaluate`` frame.

    Attributes:
        idea: Free-text business idea (blank ideas are ignored, not rejected)
    """

    idea: str
