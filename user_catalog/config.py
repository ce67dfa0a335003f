"""Configuración de la aplicación leída desde el entorno."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Tuple

from user_catalog.utils.logging import DEBUG_ENV_VAR, LEVEL_ENV_VAR, env_truthy

WINDOW_TITLE_ENV_VAR = "USER_CATALOG_WINDOW_TITLE"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Parámetros de arranque de la interfaz y del logging."""

    window_title: str = "Usuarios"
    log_level: str = "INFO"
    window_size: Tuple[int, int] = (480, 360)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Construye la configuración a partir de ``environ`` (o ``os.environ``)."""

        env = os.environ if environ is None else environ
        defaults = cls()

        log_level = env.get(LEVEL_ENV_VAR, "").strip() or defaults.log_level
        if not env.get(LEVEL_ENV_VAR) and env_truthy(env.get(DEBUG_ENV_VAR)):
            log_level = "DEBUG"

        return cls(
            window_title=env.get(WINDOW_TITLE_ENV_VAR, "").strip() or defaults.window_title,
            log_level=log_level.upper(),
        )


__all__ = ["AppConfig"]
