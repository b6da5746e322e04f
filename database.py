import logging
from datetime import date
from typing import List, Optional

from models import MedicalRecord, Patient, Role, User

logger = logging.getLogger(__name__)


class UserStore:
    """In-memory identity store; also holds the single session reference"""

    def __init__(self):
        self.users: List[User] = []
        self.current_user: Optional[User] = None

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        """Exact, case-sensitive lookup by username"""
        if username is None:
            return None
        for user in self.users:
            if user.username == username:
                return user
        return None

    def create(self, user: User) -> bool:
        """Add a user; False if the username is taken"""
        if self.find_by_username(user.username) is not None:
            logger.info("Rejected duplicate username: %s", user.username)
            return False
        self.users.append(user)
        logger.info("Created user %s with role %s", user.username, user.role)
        return True

    def update(self, user: User) -> bool:
        """Replace the user with the same username in place"""
        for index, existing in enumerate(self.users):
            if existing.username == user.username:
                self.users[index] = user
                if self.current_user is not None and self.current_user.username == user.username:
                    self.current_user = user
                logger.info("Updated user %s", user.username)
                return True
        return False

    def delete(self, username: str) -> bool:
        """Remove a user; clears the session if it belonged to them"""
        user = self.find_by_username(username)
        if user is None:
            return False
        if self.current_user is not None and self.current_user.username == username:
            self.current_user = None
            logger.info("Session cleared: user %s was deleted", username)
        self.users.remove(user)
        logger.info("Deleted user %s", username)
        return True

    def list_by_role(self, role: Role) -> List[User]:
        return [user for user in self.users if user.role == role]

    def count_by_role(self) -> dict:
        return {role: len(self.list_by_role(role)) for role in Role}


class PatientRegistry:
    """In-memory patient list with embedded medical records"""

    def __init__(self):
        self.patients: List[Patient] = []

    def all(self) -> List[Patient]:
        return list(self.patients)

    def add(self, patient: Patient):
        self.patients.append(patient)
        logger.info("Added patient %s (%s)", patient.full_name, patient.id)

    def find_by_id(self, patient_id: str) -> Optional[Patient]:
        for patient in self.patients:
            if patient.id == patient_id:
                return patient
        return None

    def update(self, patient: Patient) -> bool:
        """Replace the patient with the same id in place"""
        for index, existing in enumerate(self.patients):
            if existing.id == patient.id:
                self.patients[index] = patient
                logger.info("Updated patient %s", patient.id)
                return True
        return False

    def delete(self, patient_id: str) -> bool:
        patient = self.find_by_id(patient_id)
        if patient is None:
            return False
        self.patients.remove(patient)
        logger.info("Deleted patient %s", patient_id)
        return True

    def add_medical_record(self, patient_id: str, record: MedicalRecord) -> bool:
        """Append a record to a patient's history; False if no such patient"""
        patient = self.find_by_id(patient_id)
        if patient is None:
            logger.warning("Cannot add record: patient %s not found", patient_id)
            return False
        patient.add_medical_record(record)
        logger.info("Added %s record to patient %s", record.record_type or "untyped", patient_id)
        return True

    def remove_medical_record(self, patient_id: str, record_id: str) -> bool:
        patient = self.find_by_id(patient_id)
        if patient is None:
            return False
        for record in patient.medical_records:
            if record.id == record_id:
                patient.medical_records.remove(record)
                logger.info("Removed record %s from patient %s", record_id, patient_id)
                return True
        return False

    def filter(self, text: Optional[str]) -> List[Patient]:
        """Case-insensitive substring search over name, contact and blood type fields.

        A patient matches when the text occurs in any one of the fields.
        Empty or missing text returns every patient in registry order.
        """
        if not text:
            return self.all()
        needle = text.lower()
        return [
            patient for patient in self.patients
            if any(needle in (value or "").lower() for value in patient.searchable_fields())
        ]


def seed_users(store: UserStore):
    """Insert the demo accounts"""
    default_users = [
        ("admin", "admin123", "admin@example.com", "System", "Administrator", Role.ADMINISTRATOR),
        ("doctor1", "doctor123", "doctor1@example.com", "John", "Smith", Role.DOCTOR),
        ("doctor2", "doctor123", "doctor2@example.com", "Emily", "Johnson", Role.DOCTOR),
        ("patient1", "patient123", "patient1@example.com", "Michael", "Brown", Role.PATIENT),
        ("patient2", "patient123", "patient2@example.com", "Sarah", "Davis", Role.PATIENT),
        ("lab1", "lab123", "lab1@example.com", "Central", "Laboratory", Role.LABORATORY),
        ("visitor", "visitor123", "visitor@example.com", "Guest", "User", Role.VISITOR),
    ]

    for username, password, email, first_name, last_name, role in default_users:
        store.create(User(
            username=username,
            password=password,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
        ))
    logger.info("User store initialized with %d users", len(store.users))


def seed_patients(registry: PatientRegistry):
    """Insert the demo patients and their histories"""
    john = Patient(
        first_name="John", last_name="Smith",
        date_of_birth=date(1980, 4, 15), gender="Male",
        phone="555-123-4567", email="john.smith@example.com",
        address="123 Main St, Anytown, USA", blood_type="O+",
    )
    emily = Patient(
        first_name="Emily", last_name="Johnson",
        date_of_birth=date(1992, 7, 22), gender="Female",
        phone="555-987-6543", email="emily.johnson@example.com",
        address="456 Oak Ave, Somecity, USA", blood_type="A-",
    )
    michael = Patient(
        first_name="Michael", last_name="Williams",
        date_of_birth=date(1975, 10, 10), gender="Male",
        phone="555-456-7890", email="michael.williams@example.com",
        address="789 Pine St, Othertown, USA", blood_type="B+",
    )
    sarah = Patient(
        first_name="Sarah", last_name="Brown",
        date_of_birth=date(1988, 1, 5), gender="Female",
        phone="555-234-5678", email="sarah.brown@example.com",
        address="321 Elm St, Somewhere, USA", blood_type="AB+",
    )

    john.add_medical_record(MedicalRecord(
        doctor_name="Dr. Johnson",
        diagnosis="Hypertension",
        symptoms="Headaches, dizziness, elevated blood pressure (150/95)",
        treatment="Prescribed lisinopril 10mg daily",
        notes="Patient advised to reduce sodium intake and increase physical activity",
        prescriptions="Lisinopril 10mg, 30 tablets, take 1 daily",
        record_type="Check-up",
    ))
    john.add_medical_record(MedicalRecord(
        doctor_name="Dr. Smith",
        diagnosis="Upper respiratory infection",
        symptoms="Sore throat, cough, nasal congestion, mild fever (100.2°F)",
        treatment="Prescribed amoxicillin 500mg TID for 10 days",
        notes="Patient advised to rest and increase fluid intake",
        prescriptions="Amoxicillin 500mg, 30 tablets, take 1 three times daily",
        record_type="Illness",
    ))
    emily.add_medical_record(MedicalRecord(
        doctor_name="Dr. Davis",
        diagnosis="Annual physical",
        symptoms="No current complaints",
        treatment="Routine bloodwork ordered",
        notes="All vitals within normal limits",
        prescriptions="None",
        record_type="Check-up",
    ))
    michael.add_medical_record(MedicalRecord(
        doctor_name="Dr. Wilson",
        diagnosis="Type 2 Diabetes",
        symptoms="Polyuria, polydipsia, fatigue, blurred vision",
        treatment="Prescribed metformin 500mg BID",
        notes="Patient referred to nutritionist for dietary guidance",
        prescriptions="Metformin 500mg, 60 tablets, take 1 twice daily",
        record_type="Chronic",
    ))
    sarah.add_medical_record(MedicalRecord(
        doctor_name="Dr. Anderson",
        diagnosis="Migraine",
        symptoms="Severe headache, photophobia, nausea",
        treatment="Prescribed sumatriptan 50mg as needed",
        notes="Patient advised to identify and avoid triggers",
        prescriptions="Sumatriptan 50mg, 9 tablets, take 1 as needed for migraine",
        record_type="Illness",
    ))

    for patient in (john, emily, michael, sarah):
        registry.add(patient)
