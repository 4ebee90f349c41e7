"""Dark theme stylesheet for the Series Renamer GUI."""

# Color palette
COLORS = {
    "background": "#15171A",
    "panel": "#1F2226",
    "border": "#30343A",
    "accent": "#E0A43A",
    "accent_hover": "#F0B44A",
    "text": "#E6E6E6",
    "text_muted": "#9AA0A6",
    "text_disabled": "#60646A",
    "success": "#5CB85C",
    "error": "#E5534B",
}

DARK_STYLESHEET = f"""
QWidget {{
    background-color: {COLORS["background"]};
    color: {COLORS["text"]};
    font-size: 11pt;
}}

QGroupBox {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    border-radius: 6px;
    margin-top: 12px;
    padding: 10px;
    padding-top: 22px;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    padding: 4px 8px;
    color: {COLORS["text_muted"]};
}}

QPushButton {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    border-radius: 5px;
    padding: 6px 14px;
}}

QPushButton:hover {{
    border-color: {COLORS["accent"]};
}}

QPushButton:disabled {{
    color: {COLORS["text_disabled"]};
}}

QPushButton#primaryButton {{
    background-color: {COLORS["accent"]};
    border-color: {COLORS["accent"]};
    color: {COLORS["background"]};
}}

QPushButton#primaryButton:hover {{
    background-color: {COLORS["accent_hover"]};
}}

QPushButton#primaryButton:disabled {{
    background-color: {COLORS["border"]};
    border-color: {COLORS["border"]};
    color: {COLORS["text_disabled"]};
}}

QLineEdit, QSpinBox, QComboBox {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    border-radius: 5px;
    padding: 5px 8px;
}}

QLineEdit:focus, QSpinBox:focus, QComboBox:focus {{
    border-color: {COLORS["accent"]};
}}

QTableWidget, QListWidget {{
    background-color: {COLORS["panel"]};
    alternate-background-color: {COLORS["background"]};
    border: 1px solid {COLORS["border"]};
    gridline-color: {COLORS["border"]};
}}

QHeaderView::section {{
    background-color: {COLORS["panel"]};
    color: {COLORS["text_muted"]};
    padding: 6px;
    border: none;
    border-bottom: 1px solid {COLORS["border"]};
}}

QTextEdit {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    font-family: "Consolas", "DejaVu Sans Mono", monospace;
    font-size: 10pt;
}}

QLabel#statusLabel {{
    color: {COLORS["text_muted"]};
}}
"""
