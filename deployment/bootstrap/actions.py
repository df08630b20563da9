import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class Criticality(Enum):
    REQUIRED = "required"
    BEST_EFFORT = "best_effort"


@dataclass(frozen=True)
class BootstrapAction:
    """One funding/initialisation operation against the deployed contracts"""
    description: str
    effect: Callable[[], Any]
    criticality: Criticality
    failure_hint: Optional[str] = None


@dataclass(frozen=True)
class ActionResult:
    description: str
    criticality: Criticality
    succeeded: bool
    error: Optional[str] = None


def execute_actions(actions: Sequence[BootstrapAction]) -> List[ActionResult]:
    """
    Runs actions in order, one at a time.

    A failing REQUIRED action re-raises its original exception and nothing after
    it runs. A failing BEST_EFFORT action is logged with its hint and recorded,
    and the next action still runs.
    """
    results: List[ActionResult] = []
    for action in actions:
        logger.info(f"{action.description}...")
        try:
            action.effect()
        except Exception as e:
            if action.criticality is Criticality.REQUIRED:
                logger.error(f"{action.description} failed: {e}")
                raise
            hint = f" ({action.failure_hint})" if action.failure_hint else ""
            logger.warning(f"{action.description} failed{hint}: {e}")
            results.append(ActionResult(action.description, action.criticality, False, str(e)))
            continue

        logger.info(f"{action.description} done")
        results.append(ActionResult(action.description, action.criticality, True))

    return results
