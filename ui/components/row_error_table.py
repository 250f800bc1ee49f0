# -*- coding: utf-8 -*-
"""
Table of rows rejected by the bulk customer upload.
"""

from typing import List

from PyQt5.QtWidgets import QAbstractItemView, QHeaderView, QTableWidget, QTableWidgetItem

from models.bulk_upload import RowError
from services.translation_manager import tr


class RowErrorTable(QTableWidget):
    """Two columns, row number and reason. `set_errors` replaces the contents."""

    def __init__(self, parent=None):
        super().__init__(0, 2, parent)
        self.setHorizontalHeaderLabels([tr("upload.column.row"), tr("upload.column.reason")])
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)
        self.setVisible(False)

    def set_errors(self, errors: List[RowError]):
        self.setRowCount(0)
        for error in errors:
            row = self.rowCount()
            self.insertRow(row)
            self.setItem(row, 0, QTableWidgetItem(str(error.row)))
            self.setItem(row, 1, QTableWidgetItem(error.reason))
        self.setVisible(bool(errors))
