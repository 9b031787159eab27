"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses the platform app-data location
"""
from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

# Try to import Qt paths, but don't fail if not available (e.g., in CLI context)
try:
    from PySide6.QtCore import QStandardPaths
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

APP_NAME = "Student Records"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.

    Frozen: ~/Library/Application Support/Student Records (macOS)
            or %LOCALAPPDATA%/Student Records (Windows)
    Dev: workspace/
    """
    if not is_frozen():
        return Path.cwd() / "workspace"

    if _HAS_QT:
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        )
        if location:
            return Path(location)

    system = platform.system()
    if system == "Windows":
        base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
        return Path(base) / APP_NAME if base else Path.home() / ".student_records"
    if system == "Darwin":
        return Path.home() / "Library/Application Support" / APP_NAME
    return Path.home() / ".local/share" / APP_NAME


def get_settings_path() -> Path:
    """Get the path for storing GUI settings."""
    return get_app_data_dir() / "gui_settings.json"
