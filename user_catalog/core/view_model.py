"""Estado compartido que consumen las capas de interfaz."""

from __future__ import annotations

import logging
from typing import Callable

from user_catalog.core.services import UserService
from user_catalog.models.user import User

logger = logging.getLogger(__name__)

UsersListener = Callable[[tuple[User, ...]], None]


class UserViewModel:
    """Mantiene la última instantánea de usuarios cargada desde el servicio.

    La interfaz puede leer la instantánea por índice (``get_user_count`` /
    ``get_user_at``) o suscribirse para recibirla después de cada carga.
    """

    def __init__(self, user_service: UserService | None = None) -> None:
        self._user_service = user_service if user_service is not None else UserService()
        self.cached_users: tuple[User, ...] = ()
        self._listeners: list[UsersListener] = []

    @property
    def users(self) -> tuple[User, ...]:
        return self.cached_users

    def load_users(self) -> None:
        """Reemplaza la instantánea completa con lo que devuelve el servicio."""

        # La tupla se construye entera antes de publicarla.
        instantanea = tuple(self._user_service.get_users())
        self.cached_users = instantanea
        logger.debug("Instantánea cargada con %d usuarios", len(instantanea))

        for listener in list(self._listeners):
            listener(instantanea)

    def get_user_count(self) -> int:
        return len(self.cached_users)

    def get_user_at(self, index: int) -> User | None:
        """Devuelve el usuario en ``index`` o ``None`` si está fuera de rango."""

        if 0 <= index < len(self.cached_users):
            return self.cached_users[index]
        return None

    def subscribe(self, listener: UsersListener) -> Callable[[], None]:
        """Registra ``listener`` y devuelve la función para darlo de baja."""

        if not callable(listener):
            raise TypeError("UserViewModel.subscribe requiere un callable.")

        self._listeners.append(listener)
        logger.debug("Listener registrado (%d activos)", len(self._listeners))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


__all__ = ["UserViewModel", "UsersListener"]
