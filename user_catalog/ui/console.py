"""Listado de usuarios para la terminal."""

from __future__ import annotations

from user_catalog.core.view_model import UserViewModel


def render_user_list(view_model: UserViewModel) -> str:
    """Una línea por usuario, en el orden de la instantánea cargada."""
    lineas = []
    for indice in range(view_model.get_user_count()):
        usuario = view_model.get_user_at(indice)
        if usuario is None:
            continue
        lineas.append(f"{usuario.id:>3}  {usuario.name:<20}  {usuario.email}")
    return "\n".join(lineas)


__all__ = ["render_user_list"]
