from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from context import AppContext
from dependencies import get_context, get_current_user, require_permission
from events import USERS_CHANGED
from models import Role, User
from schemas import CurrentUserResponse, UserCreate, UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["User Management"])


@router.get("/me", response_model=CurrentUserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
    ctx: AppContext = Depends(get_context)
):
    """Get current user info"""
    return CurrentUserResponse(
        **UserResponse.from_user(current_user).model_dump(),
        permissions=ctx.auth.permissions()
    )


@router.get("/", response_model=List[UserResponse])
def list_users(
    role: Optional[Role] = None,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("manage_users"))
):
    """List user accounts, optionally by role (Administrator only)"""
    users = ctx.users.list_by_role(role) if role is not None else ctx.users.users
    return [UserResponse.from_user(user) for user in users]


@router.post("/", status_code=201, response_model=UserResponse)
def create_user_account(
    user_data: UserCreate,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("manage_users"))
):
    """Create user accounts (Administrator only)"""
    user = User(**user_data.model_dump())
    if not ctx.users.create(user):
        raise HTTPException(status_code=409, detail="Username already exists")

    ctx.events.publish(USERS_CHANGED, action="created", username=user.username)
    return UserResponse.from_user(user)


@router.put("/{username}", response_model=UserResponse)
def update_user_account(
    username: str,
    user_data: UserUpdate,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("manage_users"))
):
    """Replace a user's details; the password is kept when omitted"""
    existing = ctx.users.find_by_username(username)
    if existing is None:
        raise HTTPException(status_code=404, detail="User not found")

    fields = user_data.model_dump()
    if fields["password"] is None:
        fields["password"] = existing.password
    user = User(username=username, **fields)
    ctx.auth.update_user(user)

    ctx.events.publish(USERS_CHANGED, action="updated", username=username)
    return UserResponse.from_user(user)


@router.delete("/{username}", status_code=204)
def delete_user_account(
    username: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("manage_users"))
):
    """Delete a user; deleting yourself ends the session"""
    if not ctx.users.delete(username):
        raise HTTPException(status_code=404, detail="User not found")

    ctx.events.publish(USERS_CHANGED, action="deleted", username=username)
