"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Registro inmutable de usuario del catálogo.

    Los valores se guardan tal como llegan: sin recortes, validación ni
    normalización.
    """

    id: int
    name: str
    email: str


__all__ = ["User"]
