from fastapi import Depends, HTTPException, Request

from context import AppContext
from models import User


def get_context(request: Request) -> AppContext:
    """The application context attached in create_app"""
    return request.app.state.context


def get_current_user(ctx: AppContext = Depends(get_context)) -> User:
    """Get the user of the current session"""
    user = ctx.auth.current_user
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_permission(permission: str):
    """Dependency factory to require specific permission"""
    def check_permission(
        current_user: User = Depends(get_current_user),
        ctx: AppContext = Depends(get_context),
    ):
        if not ctx.auth.has_permission(permission):
            raise HTTPException(status_code=403, detail=f"Permission required: {permission}")
        return current_user
    return check_permission
