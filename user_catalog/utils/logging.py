"""Configuración del logger raíz con overrides por variables de entorno."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "USER_CATALOG_LOG_LEVEL"
DEBUG_ENV_VAR = "USER_CATALOG_DEBUG"


def coerce_level(value: Optional[str], fallback: int) -> int:
    """Convierte ``"DEBUG"``, ``"10"``, etc. en un nivel numérico."""

    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    if isinstance(candidate, int):
        return candidate
    return fallback


def env_truthy(value: Optional[str]) -> bool:
    """Indica si una variable de entorno vale 1, true, yes u on."""
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_env_level(environ: Mapping[str, str] | None = None) -> Optional[int]:
    env = os.environ if environ is None else environ
    value = env.get(LEVEL_ENV_VAR)
    if value:
        return coerce_level(value, logging.INFO)
    if env_truthy(env.get(DEBUG_ENV_VAR)):
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.INFO,
    environ: Mapping[str, str] | None = None,
) -> int:
    """
    Configura el logger raíz con un formato compacto.

    Overrides de entorno:
      - USER_CATALOG_LOG_LEVEL: nivel explícito
      - USER_CATALOG_DEBUG: valor verdadero -> DEBUG
    """
    fallback = (
        coerce_level(default_level, logging.INFO)
        if isinstance(default_level, str)
        else int(default_level)
    )
    env_level = resolve_env_level(environ)
    effective = env_level if env_level is not None else fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective


def level_name(level: int) -> str:
    """Nombre del nivel, para diagnósticos."""
    return logging.getLevelName(level)


__all__ = ["configure_root", "coerce_level", "env_truthy", "level_name", "resolve_env_level"]
