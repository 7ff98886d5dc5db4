"""
Scheduler service: the entry point hosts call to run one scheduling pass.
"""

import logging
from typing import Iterable, Optional, Union

from ..config import PLACEMENT_ORDER_POLICY
from ..models import PlacementOrderPolicy
from ..schemas import Task, TaskIn, ScheduleRequest, ScheduleResult
from ..scheduling.algorithms.ordering import order_tasks
from ..scheduling.constraints.input_constraints import validate_schedule_inputs
from ..scheduling.core.scheduler import PlacementEngine
from ..scheduling.utils.slot_utils import localize

logger = logging.getLogger(__name__)


def schedule(tasks: Iterable[Union[Task, TaskIn]], window, busy: Iterable = (),
             order_policy: Optional[PlacementOrderPolicy] = None) -> ScheduleResult:
    """
    Place `tasks` inside `window` around the `busy` intervals.

    Returns the placed events and the conflicts, both as naive wall-clock times
    in the window's zone. Raises InvalidScheduleInput (before placing anything)
    for an empty/inverted window or duplicate task ids.
    """
    tasks = [task.to_task() if isinstance(task, TaskIn) else task for task in tasks]
    policy = PlacementOrderPolicy(order_policy or PLACEMENT_ORDER_POLICY)

    validate_schedule_inputs(tasks, window)

    engine = PlacementEngine(window, busy)
    result = engine.run(order_tasks(tasks, policy))

    logger.info(
        f"📅 Scheduled {len(tasks)} tasks ({policy.value}): "
        f"{len(result.events)} events placed, {len(result.conflicts)} conflicts"
    )
    return result


class SchedulerService:
    """Runs schedule requests for the HTTP layer and renders zone-aware results."""

    def __init__(self, default_policy: Optional[str] = None):
        self.default_policy = PlacementOrderPolicy(default_policy or PLACEMENT_ORDER_POLICY)

    def run_request(self, request: ScheduleRequest) -> ScheduleResult:
        result = schedule(
            request.tasks,
            request.window,
            request.busy,
            order_policy=request.order_policy or self.default_policy,
        )
        return self.localize_result(result, request.window.tz)

    def localize_result(self, result: ScheduleResult, tz) -> ScheduleResult:
        """Attach the window zone to every instant so consumers get ISO strings with offsets."""
        events = [
            event.model_copy(update={"start": localize(event.start, tz), "end": localize(event.end, tz)})
            for event in result.events
        ]
        conflicts = [
            conflict.model_copy(update={"suggested_start": localize(conflict.suggested_start, tz)})
            if conflict.suggested_start else conflict
            for conflict in result.conflicts
        ]
        return ScheduleResult(events=events, conflicts=conflicts)


scheduler_service = SchedulerService()
