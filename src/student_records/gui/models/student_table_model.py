"""
Qt item models for the student table.

StudentTableModel exposes a snapshot of the store with a fixed column
schema; StudentFilterProxy adds live search and typed sorting on top of it
without touching stored order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QSortFilterProxyModel, Qt

from student_records.core.models import RecordProfile, Student

SORT_ROLE = Qt.ItemDataRole.UserRole + 1


@dataclass(frozen=True)
class Column:
    header: str
    attr: str
    numeric: bool = False


FULL_COLUMNS = (
    Column("Roll No", "id", numeric=True),
    Column("Name", "name"),
    Column("Class", "class_name"),
    Column("Marks", "marks", numeric=True),
    Column("Phone", "phone"),
    Column("Email", "email"),
)

MINIMAL_COLUMNS = (
    Column("Roll No", "id", numeric=True),
    Column("Name", "name"),
    Column("Marks", "marks", numeric=True),
)


def columns_for(profile: RecordProfile) -> tuple[Column, ...]:
    return FULL_COLUMNS if profile is RecordProfile.FULL else MINIMAL_COLUMNS


class StudentTableModel(QAbstractTableModel):
    """Read-only table over a list of students."""

    def __init__(
        self,
        students: Optional[Sequence[Student]] = None,
        profile: RecordProfile = RecordProfile.FULL,
        parent=None,
    ):
        super().__init__(parent)
        self._columns = columns_for(profile)
        self._students: List[Student] = list(students or [])

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    def set_students(self, students: Sequence[Student]) -> None:
        """Replace the displayed snapshot."""
        self.beginResetModel()
        self._students = list(students)
        self.endResetModel()

    def student_at(self, row: int) -> Student:
        return self._students[row]

    def students(self) -> List[Student]:
        return list(self._students)

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._students)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._columns)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None
        student = self._students[index.row()]
        column = self._columns[index.column()]
        value = getattr(student, column.attr)

        if role == Qt.ItemDataRole.DisplayRole:
            if column.attr == "marks":
                return student.marks_text
            return str(value)
        if role == SORT_ROLE:
            return value.lower() if isinstance(value, str) else value
        if role == Qt.ItemDataRole.TextAlignmentRole and column.numeric:
            return int(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            return self._columns[section].header
        return str(section + 1)


class StudentFilterProxy(QSortFilterProxyModel):
    """Search filter and typed sorting for StudentTableModel."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._query = ""
        self.setSortRole(SORT_ROLE)
        self.setDynamicSortFilter(True)

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, text: str) -> None:
        """Show only rows where some field contains the text (case-insensitive)."""
        self._query = text.strip()
        self.invalidateFilter()

    def filterAcceptsRow(self, source_row: int, source_parent: QModelIndex) -> bool:
        if not self._query:
            return True
        model = self.sourceModel()
        return model.student_at(source_row).matches(self._query)

    def student_at(self, row: int) -> Student:
        """Student shown at a proxy (view) row."""
        source_row = self.mapToSource(self.index(row, 0)).row()
        return self.sourceModel().student_at(source_row)

    def visible_students(self) -> List[Student]:
        """Students currently shown, in view order."""
        return [self.student_at(row) for row in range(self.rowCount())]
