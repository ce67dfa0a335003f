"""Ventana principal de la aplicación."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QItemSelection
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QListView,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from user_catalog.config import AppConfig
from user_catalog.core.view_model import UserViewModel
from user_catalog.ui.user_list_model import UserListModel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ventana clásica que aloja la lista enlazada al view-model."""

    def __init__(self, *, view_model: UserViewModel, config: AppConfig | None = None) -> None:
        super().__init__()
        self.view_model = view_model
        self.config = config or AppConfig()

        self.setWindowTitle(self.config.window_title)
        self.resize(*self.config.window_size)

        self.model = UserListModel(view_model, parent=self)

        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.clicked.connect(self._reload_data)

        self.list_view = QListView()
        self.list_view.setModel(self.model)
        self.list_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.list_view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.list_view.selectionModel().selectionChanged.connect(self._on_selection_changed)

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Usuarios"))
        top_bar.addStretch(1)
        top_bar.addWidget(self.refresh_button)

        layout = QVBoxLayout()
        layout.addLayout(top_bar)
        layout.addWidget(self.list_view)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self._reload_data()

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _reload_data(self) -> None:
        """Recarga los usuarios desde el view-model; la lista se refresca sola."""

        try:
            self.view_model.load_users()
        except Exception as exc:  # pragma: no cover - UI
            logger.exception("No se pudieron cargar usuarios")
            QMessageBox.critical(self, "Error", f"No se pudieron cargar usuarios: {exc}")
            return

        self.statusBar().showMessage(f"{self.view_model.get_user_count()} usuarios")

    def _on_selection_changed(self, selected: QItemSelection, _deselected: QItemSelection) -> None:
        indexes = selected.indexes()
        usuario = self.model.user_at(indexes[0].row()) if indexes else None
        if usuario is None:
            self.statusBar().clearMessage()
            return

        self.statusBar().showMessage(f"{usuario.name} <{usuario.email}>")

    def closeEvent(self, event) -> None:
        self.model.detach()
        super().closeEvent(event)


__all__ = ["MainWindow"]
