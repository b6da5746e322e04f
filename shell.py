"""Top-level navigation between the logged-out surfaces and the dashboards.

The shell is either UNAUTHENTICATED, showing the login or signup surface, or
AUTHENTICATED, showing exactly one role dashboard. It keeps itself in step
with the user store through the event bus: a user update or delete that
touches the session is reflected on the next event.
"""

import logging
from enum import Enum
from typing import Optional

from auth import AuthController
from config import AUTH_SURFACES, DEFAULT_AUTH_SURFACE
from dashboards import Dashboard, dashboard_for
from database import PatientRegistry, UserStore
from events import (
    PATIENTS_CHANGED,
    SECTION_CHANGED,
    SESSION_CHANGED,
    SURFACE_CHANGED,
    USERS_CHANGED,
    EventBus,
)
from exceptions import InvalidStateError
from models import Role

logger = logging.getLogger(__name__)


class ShellState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class NavigationShell:
    def __init__(self, auth: AuthController, users: UserStore,
                 patients: PatientRegistry, events: EventBus):
        self.auth = auth
        self.users = users
        self.patients = patients
        self.events = events
        self.state = ShellState.UNAUTHENTICATED
        self.surface = DEFAULT_AUTH_SURFACE
        self.dashboard: Optional[Dashboard] = None

        events.subscribe(USERS_CHANGED, self._on_users_changed)
        events.subscribe(PATIENTS_CHANGED, self._on_patients_changed)

        if auth.is_authenticated():
            self._enter_dashboard()

    def show_surface(self, name: str):
        """Switch between the login and signup surfaces"""
        if self.state != ShellState.UNAUTHENTICATED:
            raise InvalidStateError("Already logged in")
        if name not in AUTH_SURFACES:
            raise ValueError(f"Unknown surface '{name}'. Must be one of: {AUTH_SURFACES}")
        self.surface = name
        self.events.publish(SURFACE_CHANGED, surface=name)

    def login(self, username: str, password: str) -> bool:
        if not self.auth.authenticate(username, password):
            return False
        self._enter_dashboard()
        return True

    def register(self, username: str, password: str, email: str,
                 first_name: str, last_name: str, role: Role) -> bool:
        if not self.auth.register(username, password, email, first_name, last_name, role):
            return False
        self._enter_dashboard()
        return True

    def logout(self):
        self.auth.logout()
        self._leave_dashboard()

    def show_section(self, name: str):
        dashboard = self.require_dashboard()
        dashboard.show_section(name)
        self.events.publish(SECTION_CHANGED, section=name)

    def select_patient(self, patient_id: str) -> bool:
        dashboard = self.require_dashboard()
        if not dashboard.select_patient(patient_id):
            return False
        self.events.publish(SECTION_CHANGED, section=dashboard.active_section)
        return True

    def require_dashboard(self) -> Dashboard:
        if self.dashboard is None:
            raise InvalidStateError("No user is authenticated")
        return self.dashboard

    def view(self) -> dict:
        if self.dashboard is None:
            return {"state": self.state.value, "surface": self.surface}
        return {"state": self.state.value, "dashboard": self.dashboard.render()}

    def _enter_dashboard(self):
        self.dashboard = dashboard_for(self.auth.current_user, self.users, self.patients)
        self.state = ShellState.AUTHENTICATED
        logger.info("Showing %s dashboard", self.dashboard.variant)
        self.events.publish(SESSION_CHANGED, user=self.auth.current_user)

    def _leave_dashboard(self):
        self.dashboard = None
        self.state = ShellState.UNAUTHENTICATED
        self.surface = DEFAULT_AUTH_SURFACE
        logger.info("Showing %s surface", self.surface)
        self.events.publish(SESSION_CHANGED, user=None)

    def _on_users_changed(self, action: str, username: str):
        current = self.auth.current_user
        if current is None:
            if self.dashboard is not None:
                self._leave_dashboard()
            return
        if self.dashboard is None:
            self._enter_dashboard()
        elif self.dashboard.user is not current:
            if self.dashboard.user.role != current.role:
                self._enter_dashboard()
            else:
                self.dashboard.user = current

    def _on_patients_changed(self, action: str, patient_id: str):
        if action == "deleted" and self.dashboard is not None:
            self.dashboard.forget_patient(patient_id)
