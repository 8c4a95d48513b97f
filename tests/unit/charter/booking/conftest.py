import pytest

from charter.booking.applications.booking_workflow import BookingWorkflow
from charter.booking.domain import PassengerContact, StepValidator, WorkflowStep
from charter.booking.infrastructure.in_memory_session_store import InMemorySessionStore


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def workflow(asset_repository, resolver, pricing_engine, session_store, clock):
    return BookingWorkflow(
        asset_repository=asset_repository,
        validator=StepValidator(resolver, pricing_engine),
        pricing_engine=pricing_engine,
        session_store=session_store,
        clock=clock,
    )


@pytest.fixture
def contact():
    return PassengerContact(
        first_name="Layla",
        last_name="Haddad",
        email="layla@example.com",
        phone="+971500000000",
    )


@pytest.fixture
def advance_draft(workflow, contact, tomorrow):
    """正しい入力でドラフトを指定ステップまで進める Factory fixture"""

    def _advance(draft, to_step: WorkflowStep, start_hour: int = 10, addon_ids=()):
        while draft.step != to_step:
            if draft.step == WorkflowStep.DETAILS:
                draft.update_details(contact, special_requests="Birthday")
            elif draft.step == WorkflowStep.DATETIME:
                draft.choose_datetime(
                    day=tomorrow, start_hour=start_hour, duration_hours=4, guest_count=3
                )
            elif draft.step == WorkflowStep.EXTRAS:
                draft.choose_addons(addon_ids)
            workflow.transition_to(draft, draft.step.next)
        return draft

    return _advance
