"""Material Design icons via QtAwesome."""
import qtawesome as qta
from student_records.gui.styles.theme import get_colors


class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def plus(color=None):
        """Add student icon."""
        return qta.icon('mdi6.account-plus-outline', color=color or get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def edit():
        """Edit student icon."""
        return qta.icon('mdi6.account-edit-outline', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def delete():
        """Delete icon."""
        return qta.icon('mdi6.delete-outline', color=get_colors().ERROR)

    @staticmethod
    def clear_all():
        """Clear all records icon."""
        return qta.icon('mdi6.delete-sweep-outline', color=get_colors().ERROR)

    @staticmethod
    def refresh():
        """Reload CSV icon."""
        return qta.icon('mdi6.refresh', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def content_save():
        """Save icon."""
        return qta.icon('mdi6.content-save-outline', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def content_copy():
        """Copy icon."""
        return qta.icon('mdi6.content-copy', color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def magnify(color=None):
        """Search icon."""
        return qta.icon('mdi6.magnify', color=color or get_colors().TEXT_SECONDARY)
