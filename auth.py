import logging
from typing import List, Optional

from config import ROLE_PERMISSIONS
from database import UserStore
from models import Role, User

logger = logging.getLogger(__name__)


def permissions_for(role: Role) -> List[str]:
    return list(ROLE_PERMISSIONS.get(role.value, []))


class AuthController:
    """Authentication gate over the user store's session reference"""

    def __init__(self, users: UserStore):
        self.users = users

    def authenticate(self, username: str, password: str) -> bool:
        """Start a session if the password matches exactly; otherwise leave the session alone"""
        user = self.users.find_by_username(username)
        if user is None:
            logger.info("Login failed: user not found: %s", username)
            return False
        if user.password != password:
            logger.info("Login failed: password mismatch for user: %s", username)
            return False
        self.users.current_user = user
        logger.info("Authentication successful for user: %s", username)
        return True

    def register(self, username: str, password: str, email: str,
                 first_name: str, last_name: str, role: Role) -> bool:
        """Create an account and log it in; False if the username exists"""
        user = User(
            username=username,
            password=password,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
        if not self.users.create(user):
            return False
        self.users.current_user = user
        logger.info("Registered and logged in user: %s", username)
        return True

    def update_user(self, user: User) -> bool:
        return self.users.update(user)

    def logout(self):
        if self.users.current_user is not None:
            logger.info("Logged out user: %s", self.users.current_user.username)
        self.users.current_user = None

    @property
    def current_user(self) -> Optional[User]:
        return self.users.current_user

    def is_authenticated(self) -> bool:
        return self.users.current_user is not None

    def has_role(self, role: Role) -> bool:
        user = self.users.current_user
        return user is not None and user.role == role

    def permissions(self) -> List[str]:
        user = self.users.current_user
        if user is None:
            return []
        return permissions_for(user.role)

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions()
