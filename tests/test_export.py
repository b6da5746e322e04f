"""Unit tests for the patient report export."""

from datetime import date, datetime

from export import ExportStatus, export_patient, render_patient_report, suggested_filename
from models import MedicalRecord, Patient


def sample_patient() -> Patient:
    patient = Patient(
        first_name="Jane",
        last_name="Doe",
        date_of_birth=date(1985, 3, 9),
        gender="Female",
        phone="555-111-2222",
        email="jane@example.com",
        address="",
        blood_type="B-",
    )
    record = MedicalRecord(
        doctor_name="Dr. House",
        diagnosis="Lupus",
        symptoms="Fatigue\nJoint pain",
        treatment="Rest",
        notes="",
        prescriptions="None",
        record_type="Chronic",
    )
    record.date_time = datetime(2024, 2, 3, 14, 5)
    patient.add_medical_record(record)
    return patient


class TestRenderReport:
    def test_title_is_centered(self):
        lines = render_patient_report(sample_patient()).splitlines()

        assert lines[0] == " " * 29 + "PATIENT MEDICAL RECORD"
        assert lines[1].strip() == "======================="

    def test_demographics_and_contact(self):
        report = render_patient_report(sample_patient())

        assert "Name: Jane Doe\n" in report
        assert "Date of Birth: 03/09/1985 (Age: " in report
        assert "Blood Type: B-\n" in report
        assert "Contact Information\n~~~~~~~~~~~~~~~~~~~\n" in report
        assert "Address: N/A\n" in report

    def test_records_are_numbered(self):
        report = render_patient_report(sample_patient())

        assert "Record #1 (Chronic)\n" in report
        assert "Date: 02/03/2024 02:05 PM\n" in report
        assert "Doctor: Dr. House\n" in report
        assert "Notes: N/A\n" in report

    def test_multiline_values_are_indented(self):
        report = render_patient_report(sample_patient())

        assert "Symptoms: Fatigue\n    Joint pain\n" in report

    def test_no_records(self):
        report = render_patient_report(Patient(first_name="Empty", last_name="Chart"))

        assert "No medical records available." in report
        assert "Date of Birth: N/A" in report

    def test_footer(self):
        report = render_patient_report(sample_patient(), generated_at=datetime(2024, 5, 6, 9, 30))

        assert report.endswith(
            "This document is confidential and for medical use only.\n"
            "Generated on: 05/06/2024 09:30 AM\n"
        )


class TestExportPatient:
    def test_suggested_filename(self):
        assert suggested_filename(sample_patient()) == "Jane_Doe.pdf"

    def test_export_writes_utf8_text(self, tmp_path):
        patient = sample_patient()
        patient.medical_records[0].symptoms = "Fever (100.2°F)"
        offered = []

        def choose(name):
            offered.append(name)
            return tmp_path / name

        result = export_patient(patient, choose)

        assert result.status == ExportStatus.SAVED
        assert result.ok
        assert offered == ["Jane_Doe.pdf"]
        assert "100.2°F" in (tmp_path / "Jane_Doe.pdf").read_text(encoding="utf-8")

    def test_cancelled(self, tmp_path):
        result = export_patient(sample_patient(), lambda name: None)

        assert result.status == ExportStatus.CANCELLED
        assert not result.ok
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_is_distinct_from_cancel(self, tmp_path):
        result = export_patient(sample_patient(), lambda name: tmp_path / "missing" / name)

        assert result.status == ExportStatus.FAILED
        assert result.error

    def test_invalid_path_is_a_failure(self):
        result = export_patient(sample_patient(), lambda name: "/tmp/bad\x00" + name)

        assert result.status == ExportStatus.FAILED
        assert not result.ok
        assert "null byte" in result.error
