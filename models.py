from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def new_id() -> str:
    return str(uuid4())


class Role(str, Enum):
    """User roles; each value is the role's display label"""
    ADMINISTRATOR = "Administrator"
    DOCTOR = "Doctor"
    PATIENT = "Patient"
    LABORATORY = "Laboratory"
    VISITOR = "Visitor"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class User(BaseModel):
    username: str
    password: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    role: Role

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return f"{self.username} ({self.role})"


class MedicalRecord(BaseModel):
    """A dated clinical entry, owned by exactly one patient"""
    id: str = Field(default_factory=new_id, frozen=True)
    date_time: datetime = Field(default_factory=datetime.now)
    doctor_name: str = ""
    diagnosis: str = ""
    symptoms: str = ""
    treatment: str = ""
    notes: str = ""
    prescriptions: str = ""
    record_type: str = ""

    def __str__(self):
        return f"{self.record_type} - {self.diagnosis} ({self.date_time.date()})"


class Patient(BaseModel):
    """Patient demographics plus the ordered sequence of medical records"""
    id: str = Field(default_factory=new_id, frozen=True)
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[date] = None
    gender: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    blood_type: str = ""
    medical_records: List[MedicalRecord] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def age(self) -> int:
        """Years since birth, counted by calendar year only"""
        if self.date_of_birth is None:
            return 0
        return date.today().year - self.date_of_birth.year

    def add_medical_record(self, record: MedicalRecord):
        self.medical_records.append(record)

    def searchable_fields(self) -> List[str]:
        return [
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
            self.address,
            self.blood_type,
        ]

    def __str__(self):
        return self.full_name
