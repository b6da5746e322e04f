"""Role dispatch and dashboard composition.

There is one concrete ``Dashboard`` type. What a role sees is decided by a
layout builder picked from ``DASHBOARD_BUILDERS``, which must cover every
``Role``. Each section's content is computed from the stores whenever it is
rendered, so hiding and showing a section keeps nothing of its own.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from database import PatientRegistry, UserStore
from exceptions import InvalidStateError, UnknownSectionError
from models import Patient, Role, User

logger = logging.getLogger(__name__)

BODY_PARTS = ["Head", "Chest", "Abdomen", "Back", "Arms", "Legs"]
HEAD_SYMPTOMS = ["Headache", "Dizziness", "Blurred vision", "Ear pain", "Sore throat", "Facial pain"]
BODY_SYMPTOMS = ["Pain", "Numbness", "Swelling", "Redness", "Itching"]


@dataclass
class Section:
    name: str
    title: str
    description: str = ""
    render: Optional[Callable[["Dashboard"], dict]] = None


@dataclass
class DashboardLayout:
    variant: str
    title: str
    sections: List[Section]
    default_section: str

    def section(self, name: str) -> Optional[Section]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    @property
    def section_names(self) -> List[str]:
        return [section.name for section in self.sections]


@dataclass
class Dashboard:
    """A logged-in user's dashboard: one visible section at a time"""
    user: User
    layout: DashboardLayout
    users: UserStore
    patients: PatientRegistry
    active_section: str = ""
    selected_patient_id: Optional[str] = None

    def __post_init__(self):
        if not self.active_section:
            self.active_section = self.layout.default_section

    @property
    def variant(self) -> str:
        return self.layout.variant

    @property
    def sections(self) -> List[str]:
        return self.layout.section_names

    def is_visible(self, name: str) -> bool:
        return self.active_section == name

    def show_section(self, name: str):
        if self.layout.section(name) is None:
            raise UnknownSectionError(name, self.sections)
        if name != self.active_section:
            logger.debug("Dashboard %s: %s -> %s", self.variant, self.active_section, name)
        self.active_section = name

    def selected_patient(self) -> Optional[Patient]:
        if self.selected_patient_id is None:
            return None
        return self.patients.find_by_id(self.selected_patient_id)

    def select_patient(self, patient_id: str) -> bool:
        """Open a patient's record section; False if the patient does not exist"""
        if self.layout.section("patient_record") is None:
            raise InvalidStateError(f"The {self.variant} dashboard has no patient records")
        if self.patients.find_by_id(patient_id) is None:
            return False
        self.selected_patient_id = patient_id
        self.show_section("patient_record")
        return True

    def forget_patient(self, patient_id: str):
        """Drop the selection if it points at a removed patient"""
        if self.selected_patient_id != patient_id:
            return
        self.selected_patient_id = None
        if self.active_section == "patient_record":
            self.show_section(self.layout.default_section)

    def render(self) -> dict:
        section = self.layout.section(self.active_section)
        content = section.render(self) if section.render else {
            "title": section.title,
            "description": section.description,
        }
        return {
            "variant": self.variant,
            "title": self.layout.title,
            "welcome": f"Welcome, {self.user.full_name}",
            "role": self.user.role.display_name,
            "sections": self.sections,
            "active_section": self.active_section,
            "content": content,
        }


def user_summary(user: User) -> dict:
    return {
        "username": user.username,
        "name": user.full_name,
        "email": user.email,
        "role": user.role.display_name,
    }


def patient_summary(patient: Patient) -> dict:
    return {
        "id": patient.id,
        "name": patient.full_name,
        "date_of_birth": patient.date_of_birth.isoformat() if patient.date_of_birth else None,
        "gender": patient.gender,
        "phone": patient.phone,
        "blood_type": patient.blood_type,
        "records": len(patient.medical_records),
    }


def _admin_overview(dashboard: Dashboard) -> dict:
    counts = dashboard.users.count_by_role()
    return {
        "stats": {
            "Administrators": counts[Role.ADMINISTRATOR],
            "Doctors": counts[Role.DOCTOR],
            "Patients": counts[Role.PATIENT],
            "Laboratories": counts[Role.LABORATORY],
        },
        "quick_actions": ["Approve Pending Content", "System Settings", "Backup Data"],
    }


def _admin_users(dashboard: Dashboard) -> dict:
    return {"users": [user_summary(user) for user in dashboard.users.users]}


def _doctor_patients(dashboard: Dashboard) -> dict:
    return {"patients": [patient_summary(patient) for patient in dashboard.patients.all()]}


def _doctor_patient_record(dashboard: Dashboard) -> dict:
    patient = dashboard.selected_patient()
    if patient is None:
        return {"patient": None}
    return {"patient": patient.model_dump(mode="json")}


def _patient_overview(dashboard: Dashboard) -> dict:
    return {"profile": user_summary(dashboard.user)}


def _symptom_checker(dashboard: Dashboard) -> dict:
    return {
        "body_parts": BODY_PARTS,
        "symptoms": {part: HEAD_SYMPTOMS if part == "Head" else BODY_SYMPTOMS for part in BODY_PARTS},
    }


def build_admin_dashboard() -> DashboardLayout:
    return DashboardLayout(
        variant="admin",
        title="Administrator Dashboard",
        sections=[
            Section("overview", "Overview", "User statistics and quick actions", _admin_overview),
            Section("users", "User Management", "Create, edit and remove accounts", _admin_users),
        ],
        default_section="overview",
    )


def build_doctor_dashboard() -> DashboardLayout:
    return DashboardLayout(
        variant="doctor",
        title="Doctor Dashboard",
        sections=[
            Section("patients", "Patients", "Search and manage patients", _doctor_patients),
            Section("patient_record", "Patient Record", "Medical history of the selected patient",
                    _doctor_patient_record),
            Section("appointments", "Appointments", "Schedule and manage patient appointments"),
            Section("messages", "Messages", "Communicate with patients and colleagues"),
            Section("reports", "Reports", "Generate and view medical reports"),
            Section("settings", "Settings", "Configure your dashboard preferences"),
        ],
        default_section="patients",
    )


def build_patient_dashboard() -> DashboardLayout:
    return DashboardLayout(
        variant="patient",
        title="Patient Dashboard",
        sections=[
            Section("overview", "Overview", "Your account", _patient_overview),
            Section("appointments", "Upcoming Appointments", "Schedule and review your appointments"),
            Section("symptom_checker", "Symptom Checker", "Select a body part and a symptom",
                    _symptom_checker),
        ],
        default_section="overview",
    )


def build_laboratory_dashboard() -> DashboardLayout:
    return DashboardLayout(
        variant="laboratory",
        title="Laboratory Dashboard",
        sections=[
            Section("overview", "Laboratory Dashboard",
                    "Test management, result reporting and laboratory scheduling"),
        ],
        default_section="overview",
    )


def build_visitor_dashboard() -> DashboardLayout:
    return DashboardLayout(
        variant="visitor",
        title="Visitor Dashboard",
        sections=[
            Section("overview", "Visitor Dashboard", "Public information about the hospital"),
        ],
        default_section="overview",
    )


DASHBOARD_BUILDERS: Dict[Role, Callable[[], DashboardLayout]] = {
    Role.ADMINISTRATOR: build_admin_dashboard,
    Role.DOCTOR: build_doctor_dashboard,
    Role.PATIENT: build_patient_dashboard,
    Role.LABORATORY: build_laboratory_dashboard,
    Role.VISITOR: build_visitor_dashboard,
}

_unmapped = set(Role) - set(DASHBOARD_BUILDERS)
if _unmapped:
    raise RuntimeError(f"No dashboard for roles: {sorted(role.value for role in _unmapped)}")


def dashboard_for_role(role: Role) -> DashboardLayout:
    return DASHBOARD_BUILDERS[role]()


def dashboard_for(user: Optional[User], users: UserStore, patients: PatientRegistry) -> Dashboard:
    """Build the dashboard for an authenticated user"""
    if user is None:
        raise InvalidStateError("No user is authenticated")
    layout = dashboard_for_role(user.role)
    logger.info("Opening %s dashboard for %s", layout.variant, user.username)
    return Dashboard(user=user, layout=layout, users=users, patients=patients)
