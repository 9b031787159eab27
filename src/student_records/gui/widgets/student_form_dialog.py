"""
Add/Edit student dialog.

The dialog builds a Student from its fields and hands it to a submit
callback (typically StudentService.add or a bound update). If the callback
raises a RecordError the message is shown inline and the dialog stays open
so the user can correct the input.
"""
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel,
    QLineEdit, QDoubleSpinBox, QPushButton, QSizePolicy
)
from PySide6.QtCore import Qt

from student_records.core import RecordError, RecordProfile, Student
from student_records.core.schemas import MAX_MARKS, MIN_MARKS
from student_records.gui.styles.theme import Fonts, get_colors, get_styles

SubmitCallback = Callable[[Student], None]


class StudentFormDialog(QDialog):
    """Modal form for creating or editing one student."""

    def __init__(
        self,
        parent=None,
        title: str = "Add Student",
        existing: Optional[Student] = None,
        submit: Optional[SubmitCallback] = None,
        profile: RecordProfile = RecordProfile.FULL,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(420)

        C = get_colors()
        S = get_styles()

        self.profile = profile
        self.student: Optional[Student] = None
        self._submit = submit

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        heading = QLabel(title)
        heading.setStyleSheet(f"font-size: {Fonts.H2}; font-weight: {Fonts.WEIGHT_BOLD}; color: {C.TEXT_PRIMARY};")
        layout.addWidget(heading)

        form = QFormLayout()
        form.setSpacing(8)

        self.name_edit = QLineEdit()
        self.roll_edit = QLineEdit()
        self.roll_edit.setPlaceholderText("e.g. 101")
        self.class_edit = QLineEdit()
        self.class_edit.setPlaceholderText("e.g. 10-A")
        self.marks_spin = QDoubleSpinBox()
        self.marks_spin.setRange(MIN_MARKS, MAX_MARKS)
        self.marks_spin.setSingleStep(0.5)
        self.marks_spin.setDecimals(2)
        self.phone_edit = QLineEdit()
        self.email_edit = QLineEdit()

        form.addRow("Name *", self.name_edit)
        form.addRow("Roll No *", self.roll_edit)
        if profile is RecordProfile.FULL:
            form.addRow("Class *", self.class_edit)
        form.addRow("Marks *", self.marks_spin)
        if profile is RecordProfile.FULL:
            form.addRow("Phone", self.phone_edit)
            form.addRow("Email", self.email_edit)
        layout.addLayout(form)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {C.ERROR};")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        button_row = QHBoxLayout()
        button_row.setSpacing(8)
        button_row.addStretch()

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.setStyleSheet(S.BUTTON_SECONDARY)
        self.cancel_btn.setSizePolicy(QSizePolicy.Policy.Minimum, QSizePolicy.Policy.Fixed)
        self.cancel_btn.clicked.connect(self.reject)
        button_row.addWidget(self.cancel_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.setStyleSheet(S.BUTTON_PRIMARY)
        self.save_btn.setSizePolicy(QSizePolicy.Policy.Minimum, QSizePolicy.Policy.Fixed)
        self.save_btn.setDefault(True)
        self.save_btn.clicked.connect(self._on_save)
        button_row.addWidget(self.save_btn)

        layout.addLayout(button_row)

        if existing is not None:
            self._fill(existing)

        self.setStyleSheet(f"background-color: {C.BACKGROUND}; color: {C.TEXT_PRIMARY};")

    def _fill(self, student: Student) -> None:
        self.name_edit.setText(student.name)
        self.roll_edit.setText(str(student.id))
        self.class_edit.setText(student.class_name)
        self.marks_spin.setValue(student.marks)
        self.phone_edit.setText(student.phone)
        self.email_edit.setText(student.email)

    def build_student(self) -> Student:
        """
        Read the form into a Student.

        Raises:
            ValidationError: If the roll number is not a whole number
        """
        full = self.profile is RecordProfile.FULL
        return Student.from_form(
            roll_no=self.roll_edit.text(),
            name=self.name_edit.text(),
            class_name=self.class_edit.text() if full else "",
            marks=self.marks_spin.value(),
            phone=self.phone_edit.text() if full else "",
            email=self.email_edit.text() if full else "",
        )

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.show()

    def _on_save(self) -> None:
        """Build, submit, and close on success; otherwise show the error."""
        try:
            student = self.build_student()
            if self._submit is not None:
                self._submit(student)
        except RecordError as e:
            self.show_error(str(e))
            return
        self.student = student
        self.accept()
