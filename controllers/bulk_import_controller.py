# -*- coding: utf-8 -*-
"""
Bulk Import Controller
======================
Customer bulk upload (CSV/XLSX) and template download.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, OperationResult, response_message
from models.bulk_upload import BulkUploadState
from services.api_client import PropertyApiClient
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException
from services.translation_manager import tr
from services.validation_service import validate_bulk_upload
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class UploadOutcome:
    """What came back from one upload request: a response body or an error."""
    response: Any = None
    error: Optional[Exception] = None


class BulkImportController(BaseController):
    """
    Controller for the bulk upload panel.

    `upload()` runs every stage in the calling thread. The page runs
    `send_upload()` on a worker and the other stages on the GUI thread,
    so signals and `state` are only touched there.
    """

    # Signals
    row_errors_changed = pyqtSignal(list)  # List[RowError]

    def __init__(self, api: PropertyApiClient, parent=None):
        super().__init__(parent)
        self.api = api

    def validate(self, state: BulkUploadState) -> Dict[str, str]:
        return validate_bulk_upload(state)

    def upload(self, state: BulkUploadState) -> OperationResult:
        """
        Validate, then POST /upload-customers-withbuildingId.

        Row errors reported by the server (in a success or an error body)
        replace the previous list on `state`.
        """
        refused = self.check(state)
        if refused is not None:
            return refused
        self.begin_upload(state)
        return self.finish_upload(state, self.send_upload(state))

    # ==================== Upload stages ====================
    # check, begin_upload and finish_upload run on the GUI thread;
    # send_upload is the only stage a worker thread may run.

    def check(self, state: BulkUploadState) -> Optional[OperationResult]:
        """Failed result when `state` must not be sent, else None."""
        errors = self.validate(state)
        if not errors:
            return None
        logger.info(f"Upload refused before sending: {errors}")
        return OperationResult.fail(errors.get("file") or errors.get("building_id"), errors=errors)

    def begin_upload(self, state: BulkUploadState):
        self._log_operation("upload", file=os.path.basename(state.file_path), building_id=state.building_id)
        self._emit_started("upload")

    def send_upload(self, state: BulkUploadState) -> UploadOutcome:
        """Blocking request; touches neither controller state nor signals."""
        try:
            return UploadOutcome(response=self.api.upload_customers(state.file_path, state.building_id))
        except (ApiException, NetworkException, OSError, ValueError) as e:
            return UploadOutcome(error=e)

    def finish_upload(self, state: BulkUploadState, outcome: UploadOutcome) -> OperationResult:
        """
        Apply a finished request to `state` and build the page's result.

        The result's `data` is the row error list now held by `state`.
        """
        error = outcome.error
        if error is None:
            response = outcome.response
            row_errors = state.replace_errors(response.get("errors") if isinstance(response, dict) else None)
            self.row_errors_changed.emit(row_errors)
            logger.info(f"Upload finished with {len(row_errors)} rejected rows")
            self._emit_completed("upload", True)
            return OperationResult.ok(
                data=row_errors,
                message=response_message(response, tr("upload.success"))
            )

        if isinstance(error, ApiException) and "errors" in error.response_data:
            self.row_errors_changed.emit(state.replace_errors(error.response_data.get("errors")))

        if isinstance(error, (ApiException, NetworkException)):
            result = self._fail_with_server_message("upload", error, tr("upload.failed"))
        else:
            # The file went away or became unreadable after it was checked
            logger.error(f"Could not send {state.file_path}: {error!r}")
            self._emit_error("upload", tr("upload.failed"))
            result = OperationResult.fail(tr("upload.failed"))
        result.data = list(state.errors)
        return result

    def download_template(self, save_path: str) -> OperationResult[str]:
        """GET /templates/customers.csv and write it to `save_path`."""
        self._emit_started("download_template")
        try:
            content = self.api.download_customer_template(Config.TEMPLATE_FILE_NAME)
        except (ApiException, NetworkException) as e:
            mapped = map_exception(e)
            if mapped.requires_login:
                return self._fail_from_exception("download_template", e)
            self._emit_error("download_template", tr("upload.template_failed"))
            return OperationResult.fail(tr("upload.template_failed"), failure=mapped)

        try:
            directory = os.path.dirname(save_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(save_path, "wb") as f:
                f.write(content or b"")
        except OSError as e:
            logger.error(f"Could not write template to {save_path}: {e}")
            self._emit_error("download_template", tr("upload.template_failed"))
            return OperationResult.fail(tr("upload.template_failed"))

        logger.info(f"Template saved: {save_path}")
        self._emit_completed("download_template", True)
        return OperationResult.ok(data=save_path, message=tr("upload.template_saved", path=save_path))
