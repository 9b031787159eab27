"""
Entry point for the PySide6 GUI.
"""
import logging
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication, QMessageBox
    from student_records.core import AppConfig
    from student_records.gui.main_window import MainWindow
    from student_records.gui.models.settings import SettingsStore
    from student_records.gui.utils.paths import get_settings_path

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Student Records")
    app.setApplicationDisplayName("Student Records")
    app.setOrganizationName("Student Records")

    settings = SettingsStore(get_settings_path())
    if settings.load_error:
        QMessageBox.warning(
            None,
            "Settings Error",
            f"Your GUI settings file could not be loaded.\n\n{settings.load_error}\n\n"
            "Defaults will be used.",
        )

    window = MainWindow(config=AppConfig(), settings=settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
