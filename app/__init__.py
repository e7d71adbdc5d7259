"""Application factory for the unit conversion service."""

from __future__ import annotations

import importlib
from pathlib import Path

import yaml
from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from common.errors import ensure_app_error
from common.logging import get_logger, install_request_logging
from common.responses import fail, ok

from . import config as config_module
from .blueprints import iter_plugin_packages, register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

logger = get_logger("app")


def _load_yaml_config(path: Path = CONFIG_PATH) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        logger.warning("ignoring %s: top level must be a mapping", path)
        return {}
    return data


def _mapping_section(data: dict, key: str) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        logger.warning("ignoring %r settings: expected a mapping", key)
        return {}
    return section


def _load_manifests(plugin_settings: dict) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in iter_plugin_packages():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        overrides = _mapping_section(plugin_settings, entry.get("blueprint"))
        for key in ("summary", "docs"):
            if overrides.get(key):
                entry[key] = overrides[key]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None, *, config_path: Path | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)
    app.json.sort_keys = False
    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)

    yaml_config = _load_yaml_config(config_path or CONFIG_PATH)
    site_settings = _mapping_section(yaml_config, "site")
    plugin_settings = _mapping_section(yaml_config, "plugins")

    app.config["SITE_SETTINGS"] = site_settings
    if "max_content_length_mb" in site_settings:
        try:
            max_bytes = int(float(site_settings["max_content_length_mb"]) * 1024 * 1024)
            app.config["MAX_CONTENT_LENGTH"] = max_bytes
        except (TypeError, ValueError):
            logger.warning(
                "invalid max_content_length_mb %r; keeping default",
                site_settings["max_content_length_mb"],
            )
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    install_request_logging(app)
    register_plugin_blueprints(app)
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(plugin_settings)

    @app.after_request
    def apply_response_headers(response: Response) -> Response:
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.get("/")
    def home() -> Response:
        return ok(
            {
                "site": app.config.get("SITE_SETTINGS", {}),
                "plugins": app.config.get("PLUGIN_MANIFESTS", []),
            }
        )

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException) -> Response:
        return fail(ensure_app_error(error, fallback_code="http_error"))

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception) -> Response:
        logger.error("unhandled error", exc_info=error)
        return fail(ensure_app_error(error, fallback_code="internal_error"))

    return app


__all__ = ["create_app"]
