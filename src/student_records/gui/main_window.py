"""
Main Window for the Student Records GUI.
"""
import logging
import queue
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QLineEdit, QTableView, QAbstractItemView, QHeaderView, QMessageBox,
    QApplication, QDialog, QSplitter
)
from PySide6.QtCore import Qt, QTimer, QByteArray
from PySide6.QtGui import QAction, QKeySequence

from student_records import __version__
from student_records.core import AppConfig, RecordError, Student, StudentService
from student_records.gui.models.settings import SettingsStore
from student_records.gui.models.student_table_model import StudentFilterProxy, StudentTableModel
from student_records.gui.styles.theme import Fonts, apply_theme, get_styles
from student_records.gui.utils.icons import MaterialIcons
from student_records.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler, drain_log_queue
from student_records.gui.widgets.console_widget import ConsoleWidget
from student_records.gui.widgets.stats_panel import StatsPanel
from student_records.gui.widgets.student_form_dialog import StudentFormDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        service: Optional[StudentService] = None,
        settings: Optional[SettingsStore] = None,
        config: Optional[AppConfig] = None,
    ):
        super().__init__()

        if service is None:
            service = StudentService(config)
        self.service = service
        self.config = service.config

        if settings is None:
            from student_records.gui.utils.paths import get_settings_path
            settings = SettingsStore(get_settings_path())
        self.settings = settings

        # Set when the CSV exists but failed to load; the file is then never
        # overwritten implicitly
        self.csv_unreadable = False

        self.setWindowTitle("Student Records")
        self.resize(1100, 680)
        self.setMinimumSize(1000, 600)

        # --- Logging ---
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        self._build_menu()

        # Central Widget
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(12, 12, 12, 0)
        self.main_layout.setSpacing(10)

        self._build_toolbar()

        # --- Table ---
        self.table_model = StudentTableModel(profile=self.config.profile)
        self.proxy = StudentFilterProxy(self)
        self.proxy.setSourceModel(self.table_model)

        self.table = QTableView()
        self.table.setModel(self.proxy)
        self.table.horizontalHeader().setSortIndicator(-1, Qt.SortOrder.AscendingOrder)
        self.table.setSortingEnabled(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(26)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.doubleClicked.connect(lambda _index: self.on_edit())

        # Stored order until the user clicks a header
        sort_column = self.settings.get_sort_column()
        if 0 <= sort_column < self.table_model.columnCount():
            order = Qt.SortOrder.DescendingOrder if self.settings.get_sort_descending() else Qt.SortOrder.AscendingOrder
            self.table.sortByColumn(sort_column, order)
        self.table.horizontalHeader().sortIndicatorChanged.connect(self._on_sort_changed)

        # --- Stats + Console ---
        self.stats_panel = StatsPanel(self.config.pass_threshold)
        self.console = ConsoleWidget()

        top = QWidget()
        top_layout = QVBoxLayout(top)
        top_layout.setContentsMargins(0, 0, 0, 0)
        top_layout.addWidget(self.table, stretch=1)
        top_layout.addWidget(self.stats_panel)

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.splitter.addWidget(top)
        self.splitter.addWidget(self.console)
        self.splitter.setStretchFactor(0, 4)
        self.splitter.setStretchFactor(1, 1)
        self.main_layout.addWidget(self.splitter, stretch=1)

        self.statusBar().showMessage(f"v{__version__}  |  {self.config.csv_path}")

        self._restore_geometry()
        self._apply_theme(self.settings.get_dark_mode())
        self._startup_load()

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("File")

        reload_action = QAction("Reload CSV", self)
        reload_action.setShortcut(QKeySequence("Ctrl+R"))
        reload_action.triggered.connect(self.on_reload)
        file_menu.addAction(reload_action)

        save_action = QAction("Save CSV", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self.on_save)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menuBar().addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.settings.get_dark_mode())
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)

    def _build_toolbar(self) -> None:
        row = QHBoxLayout()
        row.setSpacing(8)

        search_label = QLabel("Search (Name/Roll/Class/Email):")
        search_label.setStyleSheet(f"font-weight: {Fonts.WEIGHT_MEDIUM};")
        row.addWidget(search_label)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Type to filter...")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.addAction(MaterialIcons.magnify(), QLineEdit.ActionPosition.LeadingPosition)
        self.search_edit.textChanged.connect(self._on_search_changed)
        row.addWidget(self.search_edit, stretch=1)

        self.add_btn = QPushButton("Add")
        self.edit_btn = QPushButton("Edit")
        self.delete_btn = QPushButton("Delete")
        self.clear_btn = QPushButton("Clear All")
        self.reload_btn = QPushButton("Reload CSV")
        self.save_btn = QPushButton("Save CSV")

        self.add_btn.clicked.connect(self.on_add)
        self.edit_btn.clicked.connect(self.on_edit)
        self.delete_btn.clicked.connect(self.on_delete)
        self.clear_btn.clicked.connect(self.on_clear_all)
        self.reload_btn.clicked.connect(self.on_reload)
        self.save_btn.clicked.connect(self.on_save)

        for btn in (self.add_btn, self.edit_btn, self.delete_btn,
                    self.clear_btn, self.reload_btn, self.save_btn):
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            row.addWidget(btn)

        self.main_layout.addLayout(row)

    def _style_buttons(self) -> None:
        S = get_styles()
        self.add_btn.setStyleSheet(S.BUTTON_PRIMARY)
        self.add_btn.setIcon(MaterialIcons.plus())
        self.edit_btn.setStyleSheet(S.BUTTON_SECONDARY)
        self.edit_btn.setIcon(MaterialIcons.edit())
        self.delete_btn.setStyleSheet(S.BUTTON_DANGER)
        self.delete_btn.setIcon(MaterialIcons.delete())
        self.clear_btn.setStyleSheet(S.BUTTON_DANGER)
        self.clear_btn.setIcon(MaterialIcons.clear_all())
        self.reload_btn.setStyleSheet(S.BUTTON_SECONDARY)
        self.reload_btn.setIcon(MaterialIcons.refresh())
        self.save_btn.setStyleSheet(S.BUTTON_SECONDARY)
        self.save_btn.setIcon(MaterialIcons.content_save())

    # ─────────────────────────────────────────────────────────────────────────
    # Data
    # ─────────────────────────────────────────────────────────────────────────

    def _startup_load(self) -> None:
        try:
            self.service.load_if_exists()
        except RecordError as e:
            self.csv_unreadable = True
            logger.warning(f"Could not load {self.config.csv_path}: {e}")
            logger.warning("The file will not be changed unless you save explicitly")
        if self.config.seed_when_empty and not self.csv_unreadable:
            self.service.seed_sample()
        self.refresh()

    def refresh(self) -> None:
        """Redisplay the store and recompute statistics."""
        self.table_model.set_students(self.service.list())
        self.update_stats()

    def update_stats(self) -> None:
        """Statistics over the rows currently visible in the table."""
        summary = self.service.stats(self.proxy.visible_students())
        self.stats_panel.set_summary(summary)

    def selected_student(self) -> Optional[Student]:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        return self.proxy.student_at(rows[0].row())

    def _on_search_changed(self, text: str) -> None:
        self.proxy.set_query(text)
        self.update_stats()

    def _on_sort_changed(self, column: int, order: Qt.SortOrder) -> None:
        self.settings.set_sort(column, order == Qt.SortOrder.DescendingOrder)

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def on_add(self) -> None:
        if self._open_form("Add Student", None, self.service.add):
            self.refresh()

    def on_edit(self) -> None:
        current = self.selected_student()
        if current is None:
            self._show_warning("No Selection", "Select a student to edit.")
            return
        original_id = current.id
        if self._open_form("Edit Student", current, lambda s: self.service.update(original_id, s)):
            self.refresh()

    def on_delete(self) -> None:
        student = self.selected_student()
        if student is None:
            self._show_warning("No Selection", "Select a student to delete.")
            return
        if self._confirm("Confirm Delete", f"Delete student: {student.name} (Roll {student.id})?"):
            self.service.delete(student.id)
            self.refresh()

    def on_clear_all(self) -> None:
        if not self.service.list():
            return
        if self._confirm("Confirm Clear", "This will remove ALL students. Continue?"):
            self.service.clear()
            self.refresh()

    def on_reload(self) -> None:
        if not self.service.storage.exists():
            self._show_warning("Reload", "No CSV found to reload.")
            return
        try:
            count = self.service.load()
        except RecordError as e:
            logger.error(f"Reload failed: {e}")
            self._show_error("Reload Error", f"Reload failed: {e}")
            return
        self.csv_unreadable = False
        self.refresh()
        self._show_info("Reload", f"CSV reloaded successfully ({count} students).")

    def on_save(self) -> None:
        try:
            self.service.save()
        except RecordError as e:
            logger.error(f"Save failed: {e}")
            self._show_error("Save Error", f"Save failed: {e}")
            return
        self.csv_unreadable = False
        self._show_info("Saved", f"Saved to {self.config.csv_path}")

    # ─────────────────────────────────────────────────────────────────────────
    # Dialog hooks
    # ─────────────────────────────────────────────────────────────────────────

    def _open_form(self, title: str, existing: Optional[Student], submit: Callable[[Student], None]) -> bool:
        """Run the form dialog; True if a student was submitted."""
        dialog = StudentFormDialog(self, title, existing, submit, self.config.profile)
        return dialog.exec() == QDialog.DialogCode.Accepted

    def _confirm(self, title: str, text: str) -> bool:
        answer = QMessageBox.question(
            self, title, text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def _show_info(self, title: str, text: str) -> None:
        QMessageBox.information(self, title, text)

    def _show_warning(self, title: str, text: str) -> None:
        QMessageBox.warning(self, title, text)

    def _show_error(self, title: str, text: str) -> None:
        QMessageBox.critical(self, title, text)

    # ─────────────────────────────────────────────────────────────────────────
    # Theme, logging, window state
    # ─────────────────────────────────────────────────────────────────────────

    def _toggle_theme(self, checked: bool) -> None:
        self.settings.set_dark_mode(checked)
        self._apply_theme(checked)

    def _apply_theme(self, is_dark: bool) -> None:
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, is_dark)
        self._style_buttons()
        self.stats_panel.update_theme()
        self.console.update_theme()

    def _drain_log_queue(self) -> None:
        drain_log_queue(self.log_queue, self.console.append_log)

    def _restore_geometry(self) -> None:
        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode("ascii")))

    def closeEvent(self, event) -> None:
        self.settings.set_window_geometry(bytes(self.saveGeometry().toHex()).decode("ascii"))
        if self.csv_unreadable:
            logger.warning(f"Not saving on close: {self.config.csv_path} could not be loaded")
        elif self.config.save_on_close:
            try:
                self.service.save()
            except RecordError as e:
                logger.error(f"Save on close failed: {e}")
        self.log_timer.stop()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
