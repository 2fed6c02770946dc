"""Per-run stage status tracking."""

import logging

from agentstudio.models.pipeline import STAGE_DEFINITIONS, Stage, StageStatus

logger = logging.getLogger(__name__)


class StepTracker:
    """Ordered stage list for a single run.

    Stages are built from the canonical definitions on construction, so two
    trackers never share Stage objects.
    """

    def __init__(self):
        self._stages: list[Stage] = self.initialize()

    @staticmethod
    def initialize() -> list[Stage]:
        """Fresh ordered copy of the canonical stages, all idle."""
        return [Stage(id=d.id, label=d.label, status=StageStatus.IDLE) for d in STAGE_DEFINITIONS]

    @property
    def stages(self) -> list[Stage]:
        return self._stages

    def get(self, stage_id: str) -> Stage | None:
        for stage in self._stages:
            if stage.id == stage_id:
                return stage
        return None

    def update(self, stage_id: str, status: StageStatus, detail: str | None = None) -> None:
        """Overwrite status and detail of a stage.

        Unknown ids and stages that already finished (done or error) are left
        untouched.
        """
        for index, stage in enumerate(self._stages):
            if stage.id == stage_id:
                if stage.status.is_terminal:
                    logger.debug("Ignoring update for finished stage %s", stage_id)
                    return
                # Replace rather than mutate so readers never see a half-applied update
                self._stages[index] = stage.model_copy(update={"status": status, "detail": detail})
                logger.debug("Stage %s -> %s (%s)", stage_id, status.value, detail or "")
                return
        logger.debug("Ignoring update for unknown stage %r", stage_id)

    def snapshot(self) -> list[Stage]:
        """Copies of the current stages, safe to hand to callers."""
        return [stage.model_copy() for stage in self._stages]
