# -*- coding: utf-8 -*-
"""
PropDesk Application Core Module

Models and services import `app.config`, so this package must not pull
in the main window; import it from `app.main_window`.
"""

from .config import Config, Routes, Vocabularies

__all__ = ["Config", "Routes", "Vocabularies"]
