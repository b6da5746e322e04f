from fastapi import APIRouter, Depends, HTTPException

from context import AppContext
from dependencies import get_context, get_current_user
from models import User

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/")
def current_dashboard(
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(get_current_user)
):
    """Render the visible section of the current user's dashboard"""
    return ctx.shell.view()


@router.post("/sections/{name}")
def show_section(
    name: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(get_current_user)
):
    ctx.shell.show_section(name)
    return ctx.shell.view()


@router.post("/patients/{patient_id}/select")
def select_patient(
    patient_id: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(get_current_user)
):
    """Open a patient's record on a dashboard that has one"""
    if not ctx.shell.select_patient(patient_id):
        raise HTTPException(status_code=404, detail="Patient not found")
    return ctx.shell.view()
