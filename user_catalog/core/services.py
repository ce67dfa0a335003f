"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

from user_catalog.infrastructure.repositories import UserRepository
from user_catalog.models.user import User


class UserService:
    """Productor sin estado del catálogo fijo de usuarios."""

    def __init__(self, repository: UserRepository | None = None) -> None:
        self._repository = repository if repository is not None else UserRepository()

    def get_users(self) -> list[User]:
        """Devuelve los cinco usuarios del catálogo en su orden fijo."""

        return self._repository.list_users()

    def get_user_by_id(self, user_id: int) -> User | None:
        """Busca un usuario por identificador; ``None`` si no existe."""

        return next((usuario for usuario in self.get_users() if usuario.id == user_id), None)


__all__ = ["UserService"]
