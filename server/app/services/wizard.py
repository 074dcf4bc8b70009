"""
Quote wizard state machine.

The module level functions are pure reducers: they take a WizardState and
return a new one without touching the input. WizardSession holds the
current state for one user and owns the simulated processing delay
between a validated advance and the actual step change.

    1 <-> 2 <-> 3 <-> 4 -> 5

advance is the only forward edge (validated, delayed), retreat the only
backward edge (unvalidated, immediate).
"""
import asyncio
import logging
from typing import Callable, List, Optional

from app.enums.field_key import FieldKey
from app.enums.wizard_step import WizardStep
from app.schemas.catalog import PlanNotification, SelectablePlan
from app.schemas.wizard import WizardState
from app.services.validation import is_step_enabled, validate_step

logger = logging.getLogger(__name__)

DEFAULT_TRANSITION_DELAY = 1.5 # seconds

PlanListener = Callable[[PlanNotification], None]

def update_field(state: WizardState, key: FieldKey, value: str) -> WizardState:
    key = FieldKey(key)
    answers = {**state.answers, key: value}
    # cleared without re-validating, the message comes back on the next advance
    errors = {k: message for k, message in state.errors.items() if k != key}
    return state.model_copy(update={"answers": answers, "errors": errors})

def request_advance(state: WizardState, current_year: Optional[int] = None) -> WizardState:
    if state.current_step >= WizardStep.quotes or state.transitioning:
        return state

    errors = validate_step(state.current_step, state.answers, current_year)
    if errors:
        return state.model_copy(update={"errors": errors})
    return state.model_copy(update={"transitioning": True})

def complete_advance(state: WizardState) -> WizardState:
    if not state.transitioning:
        return state
    return state.model_copy(update={
        "current_step": WizardStep(state.current_step + 1),
        "errors": {},
        "transitioning": False,
    })

def retreat(state: WizardState) -> WizardState:
    """Step back one step. Errors are left as they are; a pending advance is dropped."""
    if state.current_step <= WizardStep.vehicle:
        return state
    return state.model_copy(update={
        "current_step": WizardStep(state.current_step - 1),
        "transitioning": False,
    })

class WizardSession:
    def __init__(
        self,
        session_id: str,
        transition_delay: float = DEFAULT_TRANSITION_DELAY,
        current_year: Optional[int] = None,
    ):
        self.session_id = session_id
        self.transition_delay = transition_delay
        self.current_year = current_year
        self.state = WizardState()

        self._pending: Optional[asyncio.Task] = None
        self._plan_listeners: List[PlanListener] = []

    @property
    def step_enabled(self) -> bool:
        return is_step_enabled(self.state.current_step, self.state.answers, self.current_year)

    def update_field(self, key: FieldKey, value: str) -> WizardState:
        self.state = update_field(self.state, key, value)
        return self.state

    def advance(self) -> bool:
        """
        Validate the current step and, if it passes, schedule the move to the
        next one after transition_delay. Scheduling needs a running event
        loop; a failing step never does.

        Returns True when a transition was scheduled. Calls made while a
        transition is already pending do nothing and return False.
        """
        if self.state.transitioning:
            logger.debug("Session %s: advance ignored, transition pending", self.session_id)
            return False

        state = request_advance(self.state, self.current_year)
        if not state.transitioning:
            self.state = state
            if state.errors:
                logger.info(
                    "Session %s: step %s has errors on %s",
                    self.session_id,
                    int(state.current_step),
                    ", ".join(key.value for key in state.errors),
                )
            return False

        # looked up before the state changes, so a missing loop leaves it untouched
        loop = asyncio.get_running_loop()
        self.state = state
        self._pending = loop.create_task(self._finish_transition())
        return True

    async def _finish_transition(self):
        try:
            await asyncio.sleep(self.transition_delay)
        except asyncio.CancelledError:
            logger.info("Session %s: pending transition cancelled", self.session_id)
            raise

        self.state = complete_advance(self.state)
        self._pending = None
        logger.info("Session %s: moved to step %s", self.session_id, int(self.state.current_step))

    async def wait_for_transition(self):
        task = self._pending
        if task is not None:
            # asyncio.wait does not raise if the task gets cancelled meanwhile
            await asyncio.wait({task})

    def retreat(self) -> WizardState:
        if self.state.current_step <= WizardStep.vehicle:
            return self.state

        self._cancel_pending()
        self.state = retreat(self.state)
        logger.info("Session %s: back to step %s", self.session_id, int(self.state.current_step))
        return self.state

    def add_plan_listener(self, listener: PlanListener):
        self._plan_listeners.append(listener)

    def choose_plan(self, plan: SelectablePlan) -> Optional[PlanNotification]:
        """Only accepted on the quotes step. Notifies listeners; the state is not changed."""
        if self.state.current_step != WizardStep.quotes:
            logger.warning(
                "Session %s: plan chosen on step %s, ignored",
                self.session_id,
                int(self.state.current_step),
            )
            return None

        notification = PlanNotification(name=plan.name, monthly_price=plan.monthly_price)
        logger.info("Session %s: selected %s - $%s/month", self.session_id, plan.name, plan.monthly_price)
        for listener in self._plan_listeners:
            listener(notification)
        return notification

    def close(self):
        self._cancel_pending()

    def _cancel_pending(self):
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
