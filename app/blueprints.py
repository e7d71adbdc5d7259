"""Plugin discovery and blueprint registration."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable, List

from flask import Blueprint, Flask

from common.logging import get_logger

PLUGIN_PACKAGE = "plugins"
PLUGIN_ROOT = Path(__file__).resolve().parent.parent / PLUGIN_PACKAGE

logger = get_logger("plugins")


def iter_plugin_packages(package: str = PLUGIN_PACKAGE) -> Iterable[str]:
    """Yield dotted import paths of the plugin packages."""

    if not PLUGIN_ROOT.exists():
        return
    for module_info in pkgutil.iter_modules([str(PLUGIN_ROOT)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _plugin_blueprints(dotted: str) -> List[Blueprint]:
    module = importlib.import_module(f"{dotted}.api")
    module_blueprints = getattr(module, "blueprints", None)
    if module_blueprints:
        return list(module_blueprints)
    blueprint = getattr(module, "bp", None)
    return [blueprint] if blueprint is not None else []


def register_plugin_blueprints(app: Flask) -> None:
    for dotted in iter_plugin_packages():
        for bp in _plugin_blueprints(dotted):
            app.register_blueprint(bp)
            logger.debug("registered blueprint %s from %s", bp.name, dotted)


__all__ = ["iter_plugin_packages", "register_plugin_blueprints"]
