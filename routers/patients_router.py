from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from context import AppContext
from dashboards import patient_summary
from dependencies import get_context, require_permission
from events import PATIENTS_CHANGED
from exceptions import ValidationFailedError
from export import ExportStatus, export_patient
from models import MedicalRecord, Patient, User
from schemas import ExportRequest, ExportResponse, MedicalRecordCreate, PatientIn
from validation import validate_patient

router = APIRouter(prefix="/patients", tags=["Patients"])


def _get_patient_or_404(ctx: AppContext, patient_id: str) -> Patient:
    patient = ctx.patients.find_by_id(patient_id)
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return patient


@router.get("/")
def list_patients(
    q: Optional[str] = None,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("view_patients"))
):
    """Search patients by name, contact details or blood type"""
    return [patient_summary(patient) for patient in ctx.patients.filter(q)]


@router.get("/{patient_id}")
def get_patient(
    patient_id: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("view_patients"))
):
    return _get_patient_or_404(ctx, patient_id).model_dump(mode="json")


@router.post("/", status_code=201)
def add_patient(
    patient_data: PatientIn,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("edit_patients"))
):
    """Register a new patient (Doctor/Administrator)"""
    patient = Patient(**patient_data.model_dump())
    errors = validate_patient(patient)
    if errors:
        raise ValidationFailedError(errors)

    ctx.patients.add(patient)
    ctx.events.publish(PATIENTS_CHANGED, action="added", patient_id=patient.id)
    return patient.model_dump(mode="json")


@router.put("/{patient_id}")
def update_patient(
    patient_id: str,
    patient_data: PatientIn,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("edit_patients"))
):
    """Replace a patient's details, keeping their medical history"""
    existing = _get_patient_or_404(ctx, patient_id)
    patient = Patient(
        id=patient_id,
        medical_records=existing.medical_records,
        **patient_data.model_dump()
    )
    errors = validate_patient(patient)
    if errors:
        raise ValidationFailedError(errors)

    ctx.patients.update(patient)
    ctx.events.publish(PATIENTS_CHANGED, action="updated", patient_id=patient_id)
    return patient.model_dump(mode="json")


@router.delete("/{patient_id}", status_code=204)
def delete_patient(
    patient_id: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("edit_patients"))
):
    if not ctx.patients.delete(patient_id):
        raise HTTPException(status_code=404, detail="Patient not found")

    ctx.events.publish(PATIENTS_CHANGED, action="deleted", patient_id=patient_id)


@router.post("/{patient_id}/records", status_code=201)
def add_medical_record(
    patient_id: str,
    record_data: MedicalRecordCreate,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("edit_patients"))
):
    """Append a medical record; the doctor defaults to the current user"""
    record = MedicalRecord(**record_data.model_dump())
    if not record.doctor_name:
        record.doctor_name = current_user.full_name

    if not ctx.patients.add_medical_record(patient_id, record):
        raise HTTPException(status_code=404, detail="Patient not found")

    ctx.events.publish(PATIENTS_CHANGED, action="record_added", patient_id=patient_id)
    return record.model_dump(mode="json")


@router.delete("/{patient_id}/records/{record_id}", status_code=204)
def delete_medical_record(
    patient_id: str,
    record_id: str,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("edit_patients"))
):
    _get_patient_or_404(ctx, patient_id)
    if not ctx.patients.remove_medical_record(patient_id, record_id):
        raise HTTPException(status_code=404, detail="Medical record not found")

    ctx.events.publish(PATIENTS_CHANGED, action="record_removed", patient_id=patient_id)


@router.post("/{patient_id}/export", response_model=ExportResponse)
def export_patient_report(
    patient_id: str,
    request: ExportRequest,
    ctx: AppContext = Depends(get_context),
    current_user: User = Depends(require_permission("export_records"))
):
    """Write the patient report; a missing or blank path means the user cancelled.

    A directory path receives the suggested file name.
    """
    patient = _get_patient_or_404(ctx, patient_id)

    def choose_path(suggested: str) -> Optional[Path]:
        if request.path is None or not request.path.strip():
            return None
        destination = Path(request.path)
        return destination / suggested if destination.is_dir() else destination

    result = export_patient(patient, choose_path)
    if result.status == ExportStatus.FAILED:
        raise HTTPException(status_code=500, detail=f"Could not create file: {result.error}")

    return ExportResponse(
        status=result.status.value,
        path=str(result.path) if result.path else None
    )
