"""
Settings persistence model for the GUI.

This module handles all persistent GUI state with robust error handling.
Any malformed data should result in graceful fallback to defaults, never CTD.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    darkModeChanged = Signal(bool)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        if not isinstance(self.data, dict):
            self._load_error = "Settings file does not contain an object"
            self.data = {}

        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

        if self._load_error:
            logger.warning(f"Using default settings: {self._load_error}")

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    # ─────────────────────────────────────────────────────────────────────────
    # Window state
    # ─────────────────────────────────────────────────────────────────────────

    def get_window_geometry(self) -> Optional[str]:
        """Get saved window geometry with hex validation.

        Returns None if geometry is missing or invalid hex.
        """
        geo = self._get_dict().get("window_geometry")
        if not isinstance(geo, str):
            return None
        try:
            bytes.fromhex(geo)
            return geo
        except (ValueError, TypeError):
            logger.warning("Invalid geometry string in settings, ignoring")
            return None

    def set_window_geometry(self, geometry: str) -> None:
        self._get_dict()["window_geometry"] = geometry
        self._save()

    # ─────────────────────────────────────────────────────────────────────────
    # Table
    # ─────────────────────────────────────────────────────────────────────────

    def get_sort_column(self) -> int:
        """Column the table was last sorted by (-1 = stored order)."""
        table = self._get_section("table")
        return self._safe_int(table.get("sort_column"), -1)

    def get_sort_descending(self) -> bool:
        table = self._get_section("table")
        return bool(table.get("sort_descending", False))

    def set_sort(self, column: int, descending: bool) -> None:
        table = self._get_section("table")
        table["sort_column"] = column
        table["sort_descending"] = descending
        self._save()

    # ─────────────────────────────────────────────────────────────────────────
    # Appearance
    # ─────────────────────────────────────────────────────────────────────────

    def get_dark_mode(self) -> bool:
        ui = self._get_section("ui")
        return bool(ui.get("dark_mode", False))

    def set_dark_mode(self, enabled: bool) -> None:
        ui = self._get_section("ui")
        ui["dark_mode"] = enabled
        self._save()
        self.darkModeChanged.emit(enabled)

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _safe_int(self, value: Any, default: int) -> int:
        """Safely convert a value to int, returning default on failure."""
        if value is None or isinstance(value, bool):
            return default
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _get_section(self, name: str) -> Dict[str, Any]:
        section = self._get_dict().get(name)
        if not isinstance(section, dict):
            section = {}
            self._get_dict()[name] = section
        return section

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path:
                try:
                    if temp_path.exists():
                        temp_path.unlink()
                except OSError:
                    pass
