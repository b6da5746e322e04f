"""Patient report export.

The report is structured plain text saved under a ``.pdf`` name. Where it
goes is decided by a caller-supplied chooser that receives the suggested file
name and returns a path, or ``None`` when the user cancels.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from config import DATE_FORMAT, DATETIME_FORMAT, EXPORT_EXTENSION, EXPORT_PAGE_WIDTH
from models import Patient

logger = logging.getLogger(__name__)

TITLE = "PATIENT MEDICAL RECORD"
TITLE_RULE = "======================="
FOOTER_RULE = "-" * 70
CONFIDENTIALITY_NOTICE = "This document is confidential and for medical use only."


class ExportStatus(str, Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class ExportResult:
    status: ExportStatus
    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == ExportStatus.SAVED


def suggested_filename(patient: Patient) -> str:
    return patient.full_name.replace(" ", "_") + EXPORT_EXTENSION


def _centered(text: str) -> str:
    padding = (EXPORT_PAGE_WIDTH - len(text)) // 2
    return " " * padding + text if padding > 0 else text


def _heading(text: str) -> List[str]:
    return [text, "-" * len(text), ""]


def _subheading(text: str) -> List[str]:
    return [text, "~" * len(text)]


def _field(label: str, value: Optional[str]) -> List[str]:
    if not value:
        return [f"{label}: N/A"]
    first, *rest = value.split("\n")
    return [f"{label}: {first}"] + ["    " + line for line in rest]


def render_patient_report(patient: Patient, generated_at: Optional[datetime] = None) -> str:
    """Render the full report for one patient"""
    generated_at = generated_at or datetime.now()
    lines = [_centered(TITLE), _centered(TITLE_RULE), ""]

    lines += _heading("PATIENT INFORMATION")
    lines += _field("Name", patient.full_name)
    if patient.date_of_birth is not None:
        birth = f"{patient.date_of_birth.strftime(DATE_FORMAT)} (Age: {patient.age})"
    else:
        birth = None
    lines += _field("Date of Birth", birth)
    lines += _field("Gender", patient.gender)
    lines += _field("Blood Type", patient.blood_type)
    lines.append("")

    lines += _subheading("Contact Information")
    lines += _field("Phone", patient.phone)
    lines += _field("Email", patient.email)
    lines += _field("Address", patient.address)
    lines.append("")

    lines += _heading("MEDICAL HISTORY")
    if not patient.medical_records:
        lines.append("No medical records available.")
    for number, record in enumerate(patient.medical_records, start=1):
        lines += _subheading(f"Record #{number} ({record.record_type})")
        lines += _field("Date", record.date_time.strftime(DATETIME_FORMAT))
        lines += _field("Doctor", record.doctor_name)
        lines += _field("Diagnosis", record.diagnosis)
        lines += _field("Symptoms", record.symptoms)
        lines += _field("Treatment", record.treatment)
        lines += _field("Prescriptions", record.prescriptions)
        lines += _field("Notes", record.notes)
        lines.append("")

    lines.append(FOOTER_RULE)
    lines.append(CONFIDENTIALITY_NOTICE)
    lines.append("Generated on: " + generated_at.strftime(DATETIME_FORMAT))
    return "\n".join(lines) + "\n"


def export_patient(patient: Patient, choose_path: Callable[[str], Optional[Path]]) -> ExportResult:
    """Ask for a destination and write the report there.

    Cancellation and write failures come back as distinct statuses; nothing
    is retried.
    """
    path = choose_path(suggested_filename(patient))
    if path is None:
        logger.info("Export of patient %s cancelled", patient.id)
        return ExportResult(ExportStatus.CANCELLED)

    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(render_patient_report(patient))
    except (OSError, ValueError) as e:
        logger.error("Could not export patient %s to %s: %s", patient.id, path, e)
        return ExportResult(ExportStatus.FAILED, path=path, error=str(e))

    logger.info("Exported patient %s to %s", patient.id, path)
    return ExportResult(ExportStatus.SAVED, path=path)
