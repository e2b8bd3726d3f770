"""
WebSocket evaluation state stream.

Pushes every published evaluation state snapshot to the connected client.

Routes: WS /ws/evaluations

Dependencies: ignite.application.services.evaluation_orchestrator
System role: State subscription endpoint for presentation clients
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ignite.api.deps import get_evaluation_orchestrator
from ignite.application.services import EvaluationOrchestrator
from ignite.models.evaluation import EvaluationState
from ignite.models.streaming import (
    ClientEvaluateEvent,
    ClientEventType,
    StreamErrorCode,
    StreamEvent,
    StreamEventType,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["streaming"])

IN_PROGRESS_MESSAGE = "An evaluation is already in progress"


async def _send_error(websocket: WebSocket, code: StreamErrorCode, message: str) -> None:
    await websocket.send_json(StreamEvent.error(code, message).to_dict())


async def _forward_states(websocket: WebSocket, queue: "asyncio.Queue[EvaluationState]") -> None:
    while True:
        state = await queue.get()
        await websocket.send_json(StreamEvent.state(state).to_dict())


async def _stop_forwarder(forwarder: "asyncio.Task[None]") -> None:
    forwarder.cancel()
    try:
        await forwarder
    except asyncio.CancelledError:
        pass
    except Exception as e:
        logger.debug(
            f"{__name__}:_stop_forwarder - Forwarder ended with {type(e).__name__}: {e}"
        )


@router.websocket("/ws/evaluations")
async def websocket_evaluations(
    websocket: WebSocket,
    orchestrator: EvaluationOrchestrator = Depends(get_evaluation_orchestrator),
) -> None:
    """
    WebSocket endpoint streaming evaluation state.

    Client sends:
        {"event": "evaluate", "data": {"idea": "..."}}
        {"event": "reset"}
        {"event": "ping"}

    Server sends:
        {"event": "state", "data": {"status": "...", ...}}
        {"event": "pong", "data": {}}
        {"event": "error", "data": {"code": "...", "message": "..."}}

    Args:
        websocket: WebSocket connection
        orchestrator: Process-wide evaluation orchestrator
    """
    await websocket.accept()
    logger.info("WebSocket evaluation stream connected")

    queue: asyncio.Queue[EvaluationState] = asyncio.Queue()
    unsubscribe = orchestrator.subscribe(queue.put_nowait)
    await websocket.send_json(StreamEvent.state(orchestrator.state).to_dict())
    forwarder = asyncio.create_task(_forward_states(websocket, queue))

    try:
        while True:
            raw_data = await websocket.receive_text()
            try:
                data = json.loads(raw_data)
            except json.JSONDecodeError as e:
                logger.warning(
                    "Failed to parse JSON",
                    extra={"error_msg": str(e), "raw_data_preview": raw_data[:50]},
                )
                await _send_error(websocket, StreamErrorCode.INVALID_JSON, "Invalid JSON format")
                continue

            event_type = data.get("event") if isinstance(data, dict) else None

            if event_type == ClientEventType.PING.value:
                await websocket.send_json(StreamEvent(event=StreamEventType.PONG).to_dict())

            elif event_type == ClientEventType.EVALUATE.value:
                try:
                    payload = ClientEvaluateEvent.model_validate(data.get("data") or {})
                except ValidationError:
                    await _send_error(websocket, StreamErrorCode.MISSING_IDEA, "Idea is required")
                    continue
                if orchestrator.is_loading:
                    await _send_error(
                        websocket, StreamErrorCode.EVALUATION_IN_PROGRESS, IN_PROGRESS_MESSAGE
                    )
                    continue
                # Blank ideas are ignored by the orchestrator without a state change
                orchestrator.start(payload.idea)

            elif event_type == ClientEventType.RESET.value:
                if orchestrator.is_loading:
                    await _send_error(
                        websocket, StreamErrorCode.EVALUATION_IN_PROGRESS, IN_PROGRESS_MESSAGE
                    )
                    continue
                orchestrator.reset()

            else:
                await _send_error(
                    websocket, StreamErrorCode.UNKNOWN_EVENT, f"Unknown event: {event_type}"
                )

    except WebSocketDisconnect:
        logger.info("WebSocket evaluation stream disconnected")
    finally:
        unsubscribe()
        await _stop_forwarder(forwarder)
