"""Punto de entrada de la aplicación.

Crea la fuente de datos, el repositorio, el servicio y el view-model, y
arranca la interfaz gráfica principal o el listado por consola.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from user_catalog.config import AppConfig
from user_catalog.core.services import UserService
from user_catalog.core.view_model import UserViewModel
from user_catalog.infrastructure.catalog_source import CatalogSource
from user_catalog.infrastructure.repositories import UserRepository
from user_catalog.ui.console import render_user_list
from user_catalog.utils import logging as logging_utils

logger = logging.getLogger(__name__)

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Listado de usuarios del catálogo.")
    parser.add_argument(
        "--consola",
        action="store_true",
        help="Imprime el listado en la terminal en lugar de abrir la ventana.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LEVELS,
        default=None,
        help="Nivel de logging (por defecto, el de la configuración).",
    )
    return parser.parse_args(argv)


def build_view_model() -> UserViewModel:
    """Cablea las dependencias del núcleo compartido."""

    source = CatalogSource()
    repository = UserRepository(source)
    user_service = UserService(repository)
    return UserViewModel(user_service)


def main(argv: Sequence[str] | None = None) -> int:
    """Arranca la aplicación con las dependencias configuradas."""

    args = _parse_args(argv)
    config = AppConfig.from_env()
    # config ya resolvió las variables de entorno; el flag tiene prioridad sobre ellas
    level = logging_utils.configure_root(args.log_level or config.log_level, environ={})
    logger.info("Nivel de log efectivo: %s", logging_utils.level_name(level))

    view_model = build_view_model()

    if args.consola:
        view_model.load_users()
        print(render_user_list(view_model))
        return 0

    # import local para no requerir PyQt6 en modo consola
    from PyQt6.QtWidgets import QApplication

    from user_catalog.ui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    window = MainWindow(view_model=view_model, config=config)
    window.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    sys.exit(main())
