import logging
from dataclasses import dataclass
from typing import Optional

from auth import AuthController
from config import SEED_DEMO_DATA
from database import PatientRegistry, UserStore, seed_patients, seed_users
from events import EventBus
from shell import NavigationShell

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Every collaborator of the application, built once at startup"""
    users: UserStore
    patients: PatientRegistry
    auth: AuthController
    events: EventBus
    shell: NavigationShell


def create_context(seed: Optional[bool] = None) -> AppContext:
    if seed is None:
        seed = SEED_DEMO_DATA

    users = UserStore()
    patients = PatientRegistry()
    if seed:
        seed_users(users)
        seed_patients(patients)

    auth = AuthController(users)
    events = EventBus()
    shell = NavigationShell(auth, users, patients, events)
    logger.info("Context ready: %d users, %d patients", len(users.users), len(patients.patients))
    return AppContext(users=users, patients=patients, auth=auth, events=events, shell=shell)
