# -*- coding: utf-8 -*-
"""
Bulk Import Page - upload a CSV/XLSX file of customers for one building.

Flow:
1. Pick the building
2. Pick the file (checked for type and size before anything is sent)
3. Upload in a background thread; rejected rows are listed in a table

The customer template can be downloaded from the same page.
"""

import os
from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFileDialog, QFrame
)
from PyQt5.QtCore import pyqtSignal, QThread, pyqtSlot
from PyQt5.QtGui import QFont

from app.config import Config, Routes
from controllers.base_controller import OperationResult
from controllers.building_controller import BuildingController
from controllers.bulk_import_controller import BulkImportController, UploadOutcome
from models.bulk_upload import BulkUploadState
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.components.building_unit_selector import BuildingUnitSelector
from ui.components.row_error_table import RowErrorTable
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class UploadWorker(QThread):
    """Background worker for the upload request."""

    result_ready = pyqtSignal(object)  # UploadOutcome

    def __init__(self, controller: BulkImportController, state: BulkUploadState):
        super().__init__()
        self.controller = controller
        self.state = state

    def run(self):
        try:
            outcome = self.controller.send_upload(self.state)
        except Exception as e:
            logger.exception(f"Upload worker failed: {e}")
            outcome = UploadOutcome(error=e)
        self.result_ready.emit(outcome)


class BulkImportPage(QWidget):
    """Bulk customer upload panel."""

    navigation_requested = pyqtSignal(str)
    upload_finished = pyqtSignal(object)  # OperationResult

    def __init__(self, controller: BulkImportController,
                 building_controller: BuildingController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.building_controller = building_controller
        self.state = BulkUploadState()
        self.upload_worker: Optional[UploadWorker] = None
        self._uploading = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        title = QLabel(tr("upload.title"))
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        hint = QLabel(tr("upload.hint", max_mb=Config.MAX_UPLOAD_BYTES // (1024 * 1024)))
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #6c757d;")
        layout.addWidget(hint)

        self.selector = BuildingUnitSelector(self.building_controller, show_units=False)
        self.selector.building_changed.connect(self._on_building_changed)
        self.selector.load_failed.connect(self._show_result)
        layout.addWidget(self.selector)

        # File row
        file_frame = QFrame()
        file_frame.setStyleSheet("""
            QFrame {
                border: 2px dashed #ced4da;
                border-radius: 8px;
                background-color: #f8f9fa;
            }
        """)
        file_layout = QHBoxLayout(file_frame)
        file_layout.setContentsMargins(16, 12, 16, 12)

        self.btn_browse = ActionButton(tr("upload.select_file"), variant="outline", width=140)
        self.btn_browse.clicked.connect(self._on_browse)
        file_layout.addWidget(self.btn_browse)

        self.file_label = QLabel(tr("upload.no_file"))
        self.file_label.setObjectName("upload_file_label")
        self.file_label.setStyleSheet("border: none; color: #495057;")
        file_layout.addWidget(self.file_label, 1)
        layout.addWidget(file_frame)

        self.error_label = QLabel("")
        self.error_label.setObjectName("upload_error")
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        self.btn_template = ActionButton(tr("upload.download_template"), variant="secondary", width=180)
        self.btn_template.clicked.connect(self._on_download_template)
        buttons.addWidget(self.btn_template)
        buttons.addStretch()
        self.btn_upload = ActionButton(tr("upload.button"), variant="primary", width=140)
        self.btn_upload.clicked.connect(self._on_upload)
        buttons.addWidget(self.btn_upload)
        layout.addLayout(buttons)

        errors_title = QLabel(tr("upload.errors_title"))
        errors_title.setStyleSheet("font-weight: bold;")
        self.error_table = RowErrorTable()
        self.error_table.setObjectName("row_error_table")
        layout.addWidget(errors_title)
        layout.addWidget(self.error_table, 1)
        errors_title.setVisible(False)
        self.errors_title = errors_title

    # ==================== Inputs ====================

    def _on_building_changed(self, building_id: str):
        self.state.building_id = building_id
        self._hide_error()

    def _on_browse(self):
        filename, _ = QFileDialog.getOpenFileName(
            self,
            tr("upload.select_file"),
            "",
            Config.UPLOAD_FILE_FILTER
        )
        if filename:
            self.set_file(filename)

    def set_file(self, path: Optional[str]):
        """Select the file to upload and check it right away."""
        self.state.file_path = path or None
        self.file_label.setText(os.path.basename(path) if path else tr("upload.no_file"))

        errors = self.controller.validate(self.state)
        if errors.get("file"):
            self._show_error(errors["file"])
        else:
            self._hide_error()

    # ==================== Upload ====================

    def _on_upload(self):
        if self.is_uploading:
            return

        errors = self.controller.validate(self.state)
        if errors:
            self._show_error(errors.get("file") or errors.get("building_id"))
            return

        self._hide_error()
        self._set_uploading(True)
        self.controller.begin_upload(self.state)
        self.upload_worker = UploadWorker(self.controller, self.state)
        self.upload_worker.result_ready.connect(self._on_upload_complete)
        self.upload_worker.start()

    @property
    def is_uploading(self) -> bool:
        return self._uploading

    @pyqtSlot(object)
    def _on_upload_complete(self, outcome: UploadOutcome):
        worker = self.upload_worker
        worker.wait()
        result = self.controller.finish_upload(worker.state, outcome)
        self._set_uploading(False)
        self._show_row_errors(result.data or [])

        if not result.success and result.errors:
            self._show_error(result.message)
        self._show_result(result)
        self.upload_finished.emit(result)

    def _show_row_errors(self, errors):
        self.error_table.set_errors(errors)
        self.errors_title.setVisible(bool(errors))

    def _set_uploading(self, uploading: bool):
        self._uploading = uploading
        self.btn_upload.setEnabled(not uploading)
        self.btn_browse.setEnabled(not uploading)
        self.btn_upload.setText(tr("upload.uploading") if uploading else tr("upload.button"))

    # ==================== Template ====================

    def _on_download_template(self):
        save_path, _ = QFileDialog.getSaveFileName(
            self,
            tr("upload.download_template"),
            Config.TEMPLATE_FILE_NAME,
            "CSV Files (*.csv)"
        )
        if not save_path:
            return
        self.download_template(save_path)

    def download_template(self, save_path: str) -> OperationResult:
        result = self.controller.download_template(save_path)
        self._show_result(result)
        return result

    # ==================== Helpers ====================

    def _show_result(self, result: OperationResult):
        ErrorHandler.show_result(
            self, result,
            on_login_required=lambda: self.navigation_requested.emit(Routes.LOGIN)
        )

    def _show_error(self, message: str):
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def _hide_error(self):
        self.error_label.clear()
        self.error_label.hide()

    def refresh(self, data=None):
        """Reload the building list and clear the previous upload."""
        if self.is_uploading:
            logger.info("Refresh skipped while an upload is running")
            return
        self.state = BulkUploadState()
        self.file_label.setText(tr("upload.no_file"))
        self._hide_error()
        self._show_row_errors([])
        self.selector.load_buildings()
