"""Adaptador Qt que expone el ``UserViewModel`` a las vistas de lista."""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from user_catalog.core.view_model import UserViewModel
from user_catalog.models.user import User


class UserListModel(QAbstractListModel):
    """Modelo de lista que lee del view-model bajo demanda.

    No copia los usuarios: ``rowCount`` y ``data`` consultan directamente
    ``get_user_count`` y ``get_user_at``. Cada carga del view-model se traduce
    en un reset del modelo.
    """

    EmailRole = Qt.ItemDataRole.UserRole + 1
    IdRole = Qt.ItemDataRole.UserRole + 2

    def __init__(self, view_model: UserViewModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        unsubscribe = view_model.subscribe(self._on_users_loaded)
        self._unsubscribe: Callable[[], None] | None = unsubscribe
        # Qt puede destruir el modelo junto con su padre sin pasar por detach().
        self.destroyed.connect(lambda *_: unsubscribe())

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return self._view_model.get_user_count()

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return None

        usuario = self._view_model.get_user_at(index.row())
        if usuario is None:
            return None

        if role == Qt.ItemDataRole.DisplayRole:
            return usuario.name
        if role in (Qt.ItemDataRole.ToolTipRole, self.EmailRole):
            return usuario.email
        if role == self.IdRole:
            return usuario.id
        return None

    def roleNames(self) -> dict[int, bytes]:
        return {
            Qt.ItemDataRole.DisplayRole: b"name",
            self.EmailRole: b"email",
            self.IdRole: b"id",
        }

    def user_at(self, row: int) -> User | None:
        return self._view_model.get_user_at(row)

    def detach(self) -> None:
        """Deja de escuchar al view-model; llamadas repetidas no hacen nada."""

        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None

    def _on_users_loaded(self, _users: tuple[User, ...]) -> None:
        # El view-model ya publicó la instantánea nueva; basta con avisar a las vistas.
        self.beginResetModel()
        self.endResetModel()


__all__ = ["UserListModel"]
