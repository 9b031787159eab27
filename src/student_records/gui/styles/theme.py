"""
Theme definitions for the Student Records GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    DIVIDER = "#eeeeee"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"
    WARNING = "#f57c00"
    INFO = "#1976d2"

    # Selection
    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"

    # Table row selection
    TREE_SELECTION_BG = "#1490DF"
    TREE_SELECTION_TEXT = "#ffffff"


class ColorsDark:
    """Dark theme color palette - VS Code Dark+ inspired."""

    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"
    PRIMARY_BLUE_PRESSED = "#2A7FE8"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    DIVIDER = "#21262D"
    BORDER_FOCUS = "#3794FF"

    ERROR = "#F85149"
    SUCCESS = "#3FB950"
    WARNING = "#D29922"
    INFO = "#58A6FF"

    SELECTION_BG = "#1F6FEB"
    SELECTION_TEXT = "#FFFFFF"

    TREE_SELECTION_BG = "#3794FF"
    TREE_SELECTION_TEXT = "#FFFFFF"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    H1 = "18pt"
    H2 = "16pt"
    BODY = "14pt"
    SMALL = "12pt"
    CONSOLE = "12pt"
    STAT_VALUE = "18pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def _build_styles(C):
    """QSS fragments for one palette."""

    class _Styles:
        BUTTON_PRIMARY = f"""
            QPushButton {{
                background-color: {C.PRIMARY_BLUE};
                color: {C.TEXT_ON_PRIMARY};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                border: none;
            }}
            QPushButton:hover {{
                background-color: {C.PRIMARY_BLUE_HOVER};
            }}
            QPushButton:pressed {{
                background-color: {C.PRIMARY_BLUE_PRESSED};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
            }}
        """

        BUTTON_SECONDARY = f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
            }}
            QPushButton:hover {{
                background-color: {C.HOVER};
                border-color: {C.BORDER_FOCUS};
            }}
            QPushButton:pressed {{
                background-color: {C.BORDER};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
                border-color: {C.DISABLED_BG};
            }}
        """

        BUTTON_DANGER = f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.ERROR};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
            }}
            QPushButton:hover {{
                border-color: {C.ERROR};
            }}
        """

        INPUT_FIELD = f"""
            QLineEdit, QDoubleSpinBox {{
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px;
                background: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                selection-background-color: {C.SELECTION_BG};
                selection-color: {C.SELECTION_TEXT};
            }}
            QLineEdit:focus, QDoubleSpinBox:focus {{
                border: 1px solid {C.BORDER_FOCUS};
            }}
        """

        TABLE = f"""
            QTableView {{
                background-color: {C.SURFACE};
                alternate-background-color: {C.BACKGROUND};
                color: {C.TEXT_PRIMARY};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                gridline-color: {C.DIVIDER};
            }}
            QTableView::item:selected {{
                background-color: {C.TREE_SELECTION_BG};
                color: {C.TREE_SELECTION_TEXT};
            }}
            QHeaderView::section {{
                background-color: {C.BACKGROUND};
                color: {C.TEXT_SECONDARY};
                border: none;
                border-bottom: 1px solid {C.BORDER};
                padding: 6px;
                font-weight: {Fonts.WEIGHT_BOLD};
            }}
        """

        STAT_CARD = f"""
            QFrame#statCard {{
                background-color: {C.SURFACE};
                border: 1px solid {C.BORDER};
                border-radius: 8px;
            }}
        """

    return _Styles


Styles = _build_styles(Colors)
StylesDark = _build_styles(ColorsDark)

GLOBAL_STYLESHEET = f"""
    QMainWindow, QDialog {{
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}
    QLabel {{
        color: {Colors.TEXT_PRIMARY};
    }}
""" + Styles.INPUT_FIELD + Styles.TABLE

GLOBAL_STYLESHEET_DARK = f"""
    QMainWindow, QDialog {{
        background-color: {ColorsDark.BACKGROUND};
        color: {ColorsDark.TEXT_PRIMARY};
    }}
    QLabel {{
        color: {ColorsDark.TEXT_PRIMARY};
    }}
""" + StylesDark.INPUT_FIELD + StylesDark.TABLE


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)

# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state. Called by MainWindow._apply_theme."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def is_dark_mode() -> bool:
    return _is_dark_mode

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles
