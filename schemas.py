from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from models import Role, User


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class SignupRequest(BaseModel):
    username: str = ""
    password: str = ""
    confirm_password: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    role: Role = Role.PATIENT


class UserCreate(BaseModel):
    username: str
    password: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    role: Role


class UserUpdate(BaseModel):
    password: Optional[str] = None
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    role: Role


class UserResponse(BaseModel):
    username: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            role=user.role,
        )


class CurrentUserResponse(UserResponse):
    permissions: List[str]


class PatientIn(BaseModel):
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[date] = None
    gender: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    blood_type: str = ""


class MedicalRecordCreate(BaseModel):
    doctor_name: str = ""
    diagnosis: str = ""
    symptoms: str = ""
    treatment: str = ""
    notes: str = ""
    prescriptions: str = ""
    record_type: str = ""


class ExportRequest(BaseModel):
    path: Optional[str] = None


class ExportResponse(BaseModel):
    status: str
    path: Optional[str] = None
