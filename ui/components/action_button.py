# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer, the forms and the pages so every action
button has the same dimensions and colors.
"""

from PyQt5.QtWidgets import QPushButton

from app.config import Config


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Variants:
    - primary: solid brand color, for the main action (Next, Upload, Save)
    - secondary: gray, for Back and Skip
    - outline: light background with border, for Add/Download actions
    - danger: red, for Remove

    Usage:
        btn = ActionButton(tr("button.back"), variant="secondary")
        btn = ActionButton(tr("upload.button"), variant="primary", width=140)
    """

    STYLES = {
        "primary": (Config.PRIMARY_COLOR, "white", "none", "#005A96"),
        "secondary": ("#6c757d", "white", "none", "#5c636a"),
        "outline": ("#F0F7FF", "#3890DF", "1px solid #3890DF", "#E0EAFF"),
        "danger": (Config.ERROR_COLOR, "white", "none", "#C0392B"),
    }

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 40,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary", "outline" or "danger"
            width: Minimum width in pixels; longer labels grow the button
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)
        self.variant = variant
        self.setMinimumWidth(width)
        self.setFixedHeight(height)
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        if variant not in self.STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(self.STYLES)}")

        background, color, border, hover = self.STYLES[variant]
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: {border};
                padding: 8px 16px;
                border-radius: 4px;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:disabled {{
                background-color: #adb5bd;
                color: #f8f9fa;
                border: none;
            }}
        """)
