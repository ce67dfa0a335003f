"""Fuente de datos embebida.

En un escenario real, este módulo encapsularía las peticiones a un backend.
Para la demostración, el catálogo está embebido y se devuelve de forma
sincrónica, pero la interfaz permite intercambiar la implementación por una
real sin tocar los servicios.
"""

from __future__ import annotations

from typing import Mapping

_CATALOGO: tuple[Mapping[str, object], ...] = (
    {"id": 1, "name": "John Doe", "email": "john.doe@example.com"},
    {"id": 2, "name": "Jane Smith", "email": "jane.smith@example.com"},
    {"id": 3, "name": "Bob Johnson", "email": "bob.johnson@example.com"},
    {"id": 4, "name": "Alice Williams", "email": "alice.williams@example.com"},
    {"id": 5, "name": "Charlie Brown", "email": "charlie.brown@example.com"},
)


class CatalogSource:
    """Provee las filas crudas del catálogo de usuarios."""

    def fetch_users(self) -> tuple[Mapping[str, object], ...]:
        """Devuelve las filas en el orden fijo del catálogo."""

        return _CATALOGO


__all__ = ["CatalogSource"]
