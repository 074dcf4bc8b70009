from fastapi import APIRouter, Depends, HTTPException, Request

from app.schemas.catalog import PlanChoice, PlanNotification
from app.schemas.wizard import FieldUpdate, WizardResponse
from app.services import catalog as catalog_service
from app.services.session import SessionNotFound, SessionRegistry
from app.services.wizard import WizardSession

# handlers are async so pending transitions are only touched from the event loop
router = APIRouter(
    prefix="/wizard",
    tags=["Wizard"]
)

def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry

async def get_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> WizardSession:
    try:
        return registry.get_session(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")

def to_response(session: WizardSession) -> WizardResponse:
    return WizardResponse(
        session_id=session.session_id,
        state=session.state,
        step_enabled=session.step_enabled,
        progress=session.state.progress,
    )

@router.post("/session", response_model=WizardResponse, status_code=201)
async def create_session(registry: SessionRegistry = Depends(get_registry)):
    return to_response(registry.create_session())

@router.get("/session/{session_id}", response_model=WizardResponse)
async def read_session(session: WizardSession = Depends(get_session)):
    return to_response(session)

@router.delete("/session/{session_id}", status_code=204)
async def end_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    try:
        registry.end_session(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")

@router.patch("/session/{session_id}/fields", response_model=WizardResponse)
async def update_field(update: FieldUpdate, session: WizardSession = Depends(get_session)):
    session.update_field(update.key, update.value)
    return to_response(session)

@router.post("/session/{session_id}/advance", response_model=WizardResponse)
async def advance(wait: bool = False, session: WizardSession = Depends(get_session)):
    # the step changes after the processing delay; wait=true returns only once it has
    if session.advance() and wait:
        await session.wait_for_transition()
    return to_response(session)

@router.post("/session/{session_id}/retreat", response_model=WizardResponse)
async def retreat(session: WizardSession = Depends(get_session)):
    session.retreat()
    return to_response(session)

@router.post("/session/{session_id}/plan", response_model=PlanNotification)
async def choose_plan(choice: PlanChoice, session: WizardSession = Depends(get_session)):
    plan = catalog_service.get_plan(choice.name)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"Plan '{choice.name}' not found")

    notification = session.choose_plan(plan)
    if notification is None:
        raise HTTPException(status_code=409, detail="Plans can only be chosen on the quotes step")
    return notification
