from fastapi import APIRouter, Depends, HTTPException

from context import AppContext
from dependencies import get_context
from exceptions import ValidationFailedError
from schemas import LoginRequest, SignupRequest
from validation import validate_login, validate_signup

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login")
def login(request: LoginRequest, ctx: AppContext = Depends(get_context)):
    """Authenticate user and open their dashboard"""
    errors = validate_login(request.username, request.password)
    if errors:
        raise ValidationFailedError(errors)

    if not ctx.shell.login(request.username, request.password):
        raise HTTPException(status_code=401, detail="Incorrect username or password")

    return ctx.shell.view()


@router.post("/signup", status_code=201)
def signup(request: SignupRequest, ctx: AppContext = Depends(get_context)):
    """Create an account, log it in and open its dashboard"""
    errors = validate_signup(
        request.username,
        request.password,
        request.confirm_password,
        request.email,
        request.first_name,
        request.last_name,
    )
    if errors:
        raise ValidationFailedError(errors)

    registered = ctx.shell.register(
        request.username.strip(),
        request.password,
        request.email.strip(),
        request.first_name.strip(),
        request.last_name.strip(),
        request.role,
    )
    if not registered:
        raise HTTPException(status_code=409, detail="Username already exists. Please choose a different one.")

    return ctx.shell.view()


@router.post("/logout")
def logout(ctx: AppContext = Depends(get_context)):
    ctx.shell.logout()
    return ctx.shell.view()


@router.get("/surface")
def current_surface(ctx: AppContext = Depends(get_context)):
    return ctx.shell.view()


@router.post("/surface/{name}")
def switch_surface(name: str, ctx: AppContext = Depends(get_context)):
    """Switch between the login and signup forms"""
    try:
        ctx.shell.show_surface(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ctx.shell.view()
