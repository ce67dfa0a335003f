"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from user_catalog.infrastructure.catalog_source import CatalogSource
from user_catalog.models.user import User


class UserRepository:
    """Repositorio de usuarios basado en una fuente de catálogo."""

    def __init__(self, source: CatalogSource | None = None) -> None:
        self._source = source if source is not None else CatalogSource()

    def list_users(self) -> list[User]:
        """Devuelve una lista nueva con todos los usuarios, en orden."""

        return [
            User(id=fila["id"], name=fila["name"], email=fila["email"])
            for fila in self._source.fetch_users()
        ]


__all__ = ["UserRepository"]
