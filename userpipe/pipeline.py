from collections.abc import Callable
import logging
import time
from typing import TypeVar

from userpipe.config import Settings, get_settings
from userpipe.errors import ValidationError
from userpipe.schemas import PipelineResult, RawRecord, StepOutcome
from userpipe.step_logic import classify_users, summarize_users, validate_records


logger = logging.getLogger(__name__)
T = TypeVar("T")


class PipelineRunner:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(self, records: list[RawRecord]) -> PipelineResult:
        steps: list[StepOutcome] = []
        total_records = len(records)
        logger.info("pipeline run started", extra={"app_name": self.settings.app_name, "total_records": total_records})

        try:
            users = self._run_step(steps, "validate", lambda: validate_records(records))
            classified = self._run_step(steps, "classify", lambda: classify_users(users))
            summary = self._run_step(steps, "summarize", lambda: summarize_users(classified))
        except ValidationError as exc:
            logger.warning("pipeline run failed", extra={"error": exc.message, "failed_step": steps[-1].step_name})
            return PipelineResult(
                status="failed",
                total_records=total_records,
                summary=None,
                error=str(exc),
                steps=tuple(steps),
            )

        logger.info("pipeline run succeeded", extra={"total_records": total_records})
        return PipelineResult(
            status="succeeded",
            total_records=total_records,
            summary=summary,
            error=None,
            steps=tuple(steps),
        )

    def _run_step(self, steps: list[StepOutcome], step_name: str, fn: Callable[[], T]) -> T:
        started = time.perf_counter()
        try:
            result = fn()
        except ValidationError as exc:
            steps.append(StepOutcome(step_name, "failed", self._elapsed_ms(started), exc.message))
            raise

        steps.append(StepOutcome(step_name, "succeeded", self._elapsed_ms(started)))
        logger.debug("step succeeded", extra={"step_name": step_name})
        return result

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000


def process_user_data(records: list[RawRecord], settings: Settings | None = None) -> PipelineResult:
    return PipelineRunner(settings or get_settings()).run(records)
