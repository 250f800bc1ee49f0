# -*- coding: utf-8 -*-
"""
Every top-level package must import on its own in a fresh interpreter,
whatever module a caller happens to import first.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.mark.parametrize("module", [
    "models",
    "controllers",
    "services.validation_service",
    "services.api_client",
    "app",
    "app.main_window",
    "ui.wizards.onboarding",
])
def test_module_imports_first(module):
    completed = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=str(PROJECT_ROOT),
        env={**os.environ, "QT_QPA_PLATFORM": "offscreen"},
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert completed.returncode == 0, completed.stderr
