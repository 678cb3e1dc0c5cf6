from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f8fafc"
    background_secondary: str = "#ffffff"
    surface: str = "#f1f5f9"
    accent_primary: str = "#2563eb"
    accent_hover: str = "#1d4ed8"
    accent_soft: str = "#dbeafe"
    accent_error: str = "#dc2626"
    error_soft: str = "#fee2e2"
    text_primary: str = "#0f172a"
    text_secondary: str = "#64748b"
    border_subtle: str = "#e2e8f0"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Inter', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 10px 16px;
            border-radius: 10px;
            font-weight: 600;
        }}
        QPushButton:hover {{
            background-color: {self.accent_hover};
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QLineEdit {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_subtle};
            border-radius: 10px;
            padding: 10px 12px;
        }}
        QLineEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QWidget#eventPanel {{
            background-color: {self.background_secondary};
            border-right: 1px solid {self.border_subtle};
        }}
        QFrame#eventCard {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_subtle};
            border-radius: 12px;
        }}
        QLabel#eventTitle {{
            font-size: 15px;
            font-weight: 700;
        }}
        QLabel#eventMeta, QLabel#panelHint {{
            color: {self.text_secondary};
            font-size: 12px;
        }}
        QLabel#panelTitle {{
            font-size: 20px;
            font-weight: 800;
        }}
        QTextBrowser#chatTranscript {{
            background-color: {self.surface};
            border: 1px solid {self.border_subtle};
            border-radius: 12px;
            padding: 12px;
        }}
        """
