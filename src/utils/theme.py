from PySide6.QtGui import QPalette, QColor
from PySide6.QtCore import Qt

# (role, dark, light)
_PALETTE = (
    (QPalette.ColorRole.Window, QColor(53, 53, 53), QColor(245, 245, 245)),
    (QPalette.ColorRole.WindowText, QColor(Qt.GlobalColor.white), QColor(30, 30, 30)),
    (QPalette.ColorRole.Base, QColor(25, 25, 25), QColor(255, 255, 255)),
    (QPalette.ColorRole.AlternateBase, QColor(45, 52, 54), QColor(235, 238, 240)),
    (QPalette.ColorRole.ToolTipBase, QColor(42, 130, 218), QColor(255, 255, 220)),
    (QPalette.ColorRole.ToolTipText, QColor(Qt.GlobalColor.white), QColor(30, 30, 30)),
    (QPalette.ColorRole.Text, QColor(Qt.GlobalColor.white), QColor(30, 30, 30)),
    (QPalette.ColorRole.Button, QColor(53, 53, 53), QColor(230, 230, 230)),
    (QPalette.ColorRole.ButtonText, QColor(Qt.GlobalColor.white), QColor(30, 30, 30)),
    (QPalette.ColorRole.Highlight, QColor(0, 184, 148), QColor(0, 150, 120)),
    (QPalette.ColorRole.HighlightedText, QColor(Qt.GlobalColor.black), QColor(Qt.GlobalColor.white)),
)

DISABLED_TEXT = QColor(128, 128, 128)


def apply_theme(app, theme: str = "dark"):
    """Switch the application to Fusion with a dark or light palette."""
    app.setStyle("Fusion")
    dark = theme != "light"
    palette = QPalette()
    for role, dark_color, light_color in _PALETTE:
        palette.setColor(role, dark_color if dark else light_color)

    for role in (QPalette.ColorRole.ButtonText, QPalette.ColorRole.WindowText, QPalette.ColorRole.Text):
        palette.setColor(QPalette.ColorGroup.Disabled, role, DISABLED_TEXT)

    app.setPalette(palette)
