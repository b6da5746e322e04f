"""Unit tests for the navigation shell state machine."""

import pytest

from events import PATIENTS_CHANGED, SESSION_CHANGED, USERS_CHANGED
from exceptions import InvalidStateError
from models import Role
from shell import ShellState


class TestAuthSurfaces:
    def test_starts_on_login_surface(self, ctx):
        assert ctx.shell.state == ShellState.UNAUTHENTICATED
        assert ctx.shell.surface == "login"
        assert ctx.shell.dashboard is None

    def test_switch_to_signup(self, ctx):
        ctx.shell.show_surface("signup")

        assert ctx.shell.view() == {"state": "unauthenticated", "surface": "signup"}

    def test_unknown_surface(self, ctx):
        with pytest.raises(ValueError):
            ctx.shell.show_surface("reset-password")

    def test_surface_switch_needs_logged_out_shell(self, ctx):
        ctx.shell.login("admin", "admin123")

        with pytest.raises(InvalidStateError):
            ctx.shell.show_surface("signup")


class TestTransitions:
    def test_login_shows_role_dashboard(self, ctx):
        assert ctx.shell.login("doctor1", "doctor123") is True

        assert ctx.shell.state == ShellState.AUTHENTICATED
        assert ctx.shell.dashboard.variant == "doctor"
        assert ctx.shell.dashboard.active_section == "patients"

    def test_failed_login_stays_logged_out(self, ctx):
        assert ctx.shell.login("admin", "wrong") is False

        assert ctx.shell.state == ShellState.UNAUTHENTICATED
        assert ctx.auth.is_authenticated() is False

    def test_register_shows_dashboard(self, ctx):
        ok = ctx.shell.register("lab2", "pw", "lab2@example.com", "Second", "Lab", Role.LABORATORY)

        assert ok is True
        assert ctx.shell.dashboard.variant == "laboratory"

    def test_register_duplicate_stays_logged_out(self, ctx):
        assert ctx.shell.register("admin", "pw", "a@b.c", "A", "B", Role.VISITOR) is False
        assert ctx.shell.state == ShellState.UNAUTHENTICATED

    def test_logout_discards_dashboard(self, ctx):
        ctx.shell.login("admin", "admin123")

        ctx.shell.logout()

        assert ctx.shell.state == ShellState.UNAUTHENTICATED
        assert ctx.shell.dashboard is None
        assert ctx.shell.surface == "login"
        assert ctx.auth.is_authenticated() is False

    def test_relogin_starts_on_default_section(self, ctx):
        ctx.shell.login("doctor1", "doctor123")
        ctx.shell.show_section("settings")
        ctx.shell.logout()

        ctx.shell.login("doctor1", "doctor123")

        assert ctx.shell.dashboard.active_section == "patients"

    def test_section_navigation_needs_session(self, ctx):
        with pytest.raises(InvalidStateError):
            ctx.shell.show_section("patients")

    def test_scenario_admin_round_trip(self, ctx):
        assert ctx.shell.login("admin", "admin123") is True
        assert ctx.shell.dashboard.variant == "admin"

        ctx.shell.logout()
        assert ctx.auth.is_authenticated() is False

        assert ctx.shell.login("admin", "wrong") is False
        assert ctx.auth.current_user is None

    def test_session_events(self, ctx):
        seen = []
        ctx.events.subscribe(SESSION_CHANGED, lambda user: seen.append(user.username if user else None))

        ctx.shell.login("visitor", "visitor123")
        ctx.shell.logout()

        assert seen == ["visitor", None]


class TestStoreEvents:
    def test_deleting_self_logs_out(self, ctx):
        ctx.shell.login("admin", "admin123")

        ctx.users.delete("admin")
        ctx.events.publish(USERS_CHANGED, action="deleted", username="admin")

        assert ctx.shell.state == ShellState.UNAUTHENTICATED
        assert ctx.shell.dashboard is None

    def test_role_change_rebuilds_dashboard(self, ctx):
        ctx.shell.login("doctor2", "doctor123")
        updated = ctx.users.find_by_username("doctor2").model_copy(update={"role": Role.LABORATORY})

        ctx.auth.update_user(updated)
        ctx.events.publish(USERS_CHANGED, action="updated", username="doctor2")

        assert ctx.shell.dashboard.variant == "laboratory"

    def test_name_change_keeps_section(self, ctx):
        ctx.shell.login("doctor2", "doctor123")
        ctx.shell.show_section("messages")
        updated = ctx.users.find_by_username("doctor2").model_copy(update={"first_name": "Em"})

        ctx.auth.update_user(updated)
        ctx.events.publish(USERS_CHANGED, action="updated", username="doctor2")

        assert ctx.shell.dashboard.active_section == "messages"
        assert ctx.shell.dashboard.render()["welcome"] == "Welcome, Em Johnson"

    def test_deleted_patient_closes_record(self, ctx, john):
        ctx.shell.login("doctor1", "doctor123")
        ctx.shell.select_patient(john.id)

        ctx.patients.delete(john.id)
        ctx.events.publish(PATIENTS_CHANGED, action="deleted", patient_id=john.id)

        assert ctx.shell.dashboard.active_section == "patients"
