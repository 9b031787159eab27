"""Unit tests for the add/edit student dialog."""

import pytest
from PySide6.QtWidgets import QDialog

from student_records.core import DuplicateIdError, RecordProfile, Student, StudentRepository
from student_records.gui.widgets.student_form_dialog import StudentFormDialog


def _fill(dialog, roll="7", name="Asha", class_name="10-A", marks=80.0, phone="", email=""):
    dialog.roll_edit.setText(roll)
    dialog.name_edit.setText(name)
    dialog.class_edit.setText(class_name)
    dialog.marks_spin.setValue(marks)
    dialog.phone_edit.setText(phone)
    dialog.email_edit.setText(email)


class TestStudentFormDialog:
    """Tests for StudentFormDialog."""

    def test_init_when_existing_then_fields_filled(self, qtbot):
        existing = Student(5, "Ben", "10-B", 39.5, "9876543210", "ben@example.com")
        dialog = StudentFormDialog(title="Edit Student", existing=existing)
        qtbot.addWidget(dialog)
        assert dialog.roll_edit.text() == "5"
        assert dialog.name_edit.text() == "Ben"
        assert dialog.marks_spin.value() == 39.5
        assert dialog.email_edit.text() == "ben@example.com"

    def test_save_when_valid_then_submitted_and_accepted(self, qtbot):
        submitted = []
        dialog = StudentFormDialog(submit=submitted.append)
        qtbot.addWidget(dialog)
        _fill(dialog, phone=" 9876543210 ")

        dialog.save_btn.click()

        assert dialog.result() == QDialog.DialogCode.Accepted
        assert submitted == [Student(7, "Asha", "10-A", 80.0, "9876543210", "")]
        assert dialog.student == submitted[0]

    def test_save_when_roll_not_numeric_then_error_shown(self, qtbot):
        submitted = []
        dialog = StudentFormDialog(submit=submitted.append)
        qtbot.addWidget(dialog)
        _fill(dialog, roll="abc")

        dialog.save_btn.click()

        assert submitted == []
        assert not dialog.error_label.isHidden()
        assert "Roll No" in dialog.error_label.text()
        assert dialog.result() != QDialog.DialogCode.Accepted

    def test_save_when_submit_rejects_then_dialog_stays_open(self, qtbot):
        repo = StudentRepository()
        repo.add(Student(7, "Taken", "10-A", 50.0))
        dialog = StudentFormDialog(submit=repo.add)
        qtbot.addWidget(dialog)
        _fill(dialog)

        dialog.save_btn.click()

        assert dialog.error_label.text() == str(DuplicateIdError(7))
        assert dialog.student is None

    def test_save_when_validation_fails_then_message_shown(self, qtbot):
        repo = StudentRepository()
        dialog = StudentFormDialog(submit=repo.add)
        qtbot.addWidget(dialog)
        _fill(dialog, email="not-an-email")

        dialog.save_btn.click()

        assert dialog.error_label.text() == "Invalid email."
        assert len(repo) == 0

    def test_build_when_minimal_profile_then_optional_fields_ignored(self, qtbot):
        dialog = StudentFormDialog(profile=RecordProfile.MINIMAL)
        qtbot.addWidget(dialog)
        _fill(dialog, class_name="ignored", email="x@y")
        assert dialog.build_student() == Student(7, "Asha", marks=80.0)
