"""Evaluation orchestrator service.

Owns the single EvaluationState cell and sequences the two Gemini calls:
1. Structured analysis (required; failure ends in ErrorState)
2. Hero image (best-effort; failure only drops the image)

Consumers read ``state`` or subscribe to snapshots; nothing else mutates it.
A second evaluation while one is loading is rejected outright, never queued
and never cancelling the in-flight call.

Dependencies: asyncio, logging, evaluation agent, models, observability
System role: Lifecycle state machine between API layer and agent layer
"""

import asyncio
import logging
from typing import Callable, Protocol

from ignite.core.evaluation_agent.agent.analysis_prompt import (
    build_analysis_prompt,
    is_submittable,
)
from ignite.core.evaluation_agent.agent.evaluation_schema import (
    AnalysisResult,
    HeroImage,
)
from ignite.core.evaluation_agent.agent.image_generation_prompt import (
    build_image_prompt,
)
from ignite.core.exceptions import EvaluationFailedError
from ignite.models.evaluation import (
    ErrorState,
    EvaluationState,
    EvaluationStatus,
    IdleState,
    LoadingState,
    SuccessState,
)
from ignite.observability.correlation import correlation_scope, new_correlation_id
from ignite.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[EvaluationState], None]


class AnalysisSubmitter(Protocol):
    """Anything that turns an analysis prompt into a validated result."""

    async def submit(self, prompt: str) -> AnalysisResult: ...


class ImageSubmitter(Protocol):
    """Anything that turns an image prompt into an optional hero image."""

    async def submit(self, prompt: str) -> HeroImage | None: ...


class EvaluationOrchestrator:
    """State machine driving one evaluation at a time.

    Transitions: Idle -> Loading -> (Success | Error) -> Idle. Exactly one
    snapshot is published per transition.
    """

    def __init__(
        self,
        analysis_client: AnalysisSubmitter,
        image_client: ImageSubmitter,
    ) -> None:
        """Initialize orchestrator with its two clients.

        Args:
            analysis_client: Structured analysis client
            image_client: Hero image client
        """
        self._analysis_client = analysis_client
        self._image_client = image_client
        self._state: EvaluationState = IdleState()
        self._listeners: list[StateListener] = []
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> EvaluationState:
        """Current state snapshot."""
        return self._state

    @property
    def is_loading(self) -> bool:
        """Whether an evaluation is in flight."""
        return self._state.status == EvaluationStatus.LOADING

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for every published snapshot.

        Args:
            listener: Called synchronously with each new snapshot

        Returns:
            Callable[[], None]: Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: EvaluationState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error(
                    f"{__name__}:_publish - listener failed - {type(e).__name__}: {e}",
                    exc_info=True,
                )

    def reset(self) -> EvaluationState:
        """Return to Idle from a terminal state.

        No-op while loading or when already idle.

        Returns:
            EvaluationState: State after the call
        """
        if self._state.status in (EvaluationStatus.SUCCESS, EvaluationStatus.ERROR):
            logger.info(f"{__name__}:reset - {self._state.status.value} -> idle")
            self._publish(IdleState())
        return self._state

    def start(self, idea: str) -> "asyncio.Task[EvaluationState] | None":
        """Enter Loading and schedule the pipeline without awaiting it.

        The guard and the Loading transition run without an intervening
        await, so concurrent callers on one event loop cannot both pass.

        Args:
            idea: Raw idea text

        Returns:
            asyncio.Task | None: Pipeline task, or None if the call was ignored
        """
        if not is_submittable(idea):
            logger.debug(f"{__name__}:start - Ignoring empty idea")
            return None
        if self.is_loading:
            logger.warning(
                f"{__name__}:start - Rejected, evaluation already in progress"
            )
            return None

        evaluation_id = new_correlation_id()
        logger.info(
            f"{__name__}:start - START evaluation_id={evaluation_id}, "
            f"idea_len={len(idea.strip())}"
        )
        self._publish(LoadingState())
        self._task = asyncio.create_task(self._run_pipeline(idea, evaluation_id))
        return self._task

    async def evaluate(self, idea: str) -> EvaluationState:
        """Run one evaluation end to end.

        Empty ideas and calls made while loading return the current state
        unchanged.

        Args:
            idea: Raw idea text

        Returns:
            EvaluationState: Terminal state of this evaluation, or the
            unchanged state when the call was ignored
        """
        task = self.start(idea)
        if task is None:
            return self._state
        return await task

    async def shutdown(self) -> None:
        """Cancel an in-flight evaluation, leaving the state in Error."""
        task = self._task
        if task is None or task.done():
            return
        logger.info(f"{__name__}:shutdown - Cancelling in-flight evaluation")
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        # A task cancelled before its first step never published a terminal state
        if self.is_loading:
            self._publish(ErrorState())

    async def _run_pipeline(self, idea: str, evaluation_id: str) -> EvaluationState:
        with correlation_scope(evaluation_id):
            return await self._execute_pipeline(idea, evaluation_id)

    async def _execute_pipeline(self, idea: str, evaluation_id: str) -> EvaluationState:
        try:
            result = await self._analysis_client.submit(build_analysis_prompt(idea))
        except EvaluationFailedError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_execute_pipeline - Analysis failed ({e.reason})",
                e,
                evaluation_id=evaluation_id,
            )
            self._publish(ErrorState())
            return self._state
        except asyncio.CancelledError:
            logger.warning(
                f"{__name__}:_execute_pipeline - Cancelled evaluation_id={evaluation_id}"
            )
            self._publish(ErrorState())
            raise
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_execute_pipeline - Unexpected analysis error",
                e,
                evaluation_id=evaluation_id,
            )
            self._publish(ErrorState())
            return self._state

        try:
            hero_image = await self._generate_hero_image(idea, evaluation_id)
        except asyncio.CancelledError:
            logger.warning(
                f"{__name__}:_execute_pipeline - Cancelled evaluation_id={evaluation_id}"
            )
            self._publish(ErrorState())
            raise

        logger.info(
            f"{__name__}:_execute_pipeline - END evaluation_id={evaluation_id}, "
            f"score={result.evaluation_score}, has_image={hero_image is not None}"
        )
        self._publish(SuccessState(result=result, hero_image=hero_image))
        return self._state

    async def _generate_hero_image(
        self, idea: str, evaluation_id: str
    ) -> HeroImage | None:
        try:
            return await self._image_client.submit(build_image_prompt(idea))
        except Exception as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:_generate_hero_image - Dropping image - {type(e).__name__}",
                evaluation_id=evaluation_id,
                error_msg=str(e),
            )
            return None
