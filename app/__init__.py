"""Application factory for the eUnits conversion service."""

from __future__ import annotations

import importlib
import os
import pkgutil
from pathlib import Path
from typing import Iterable

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import AppError, NotFoundAppError, ValidationAppError
from common.logging import get_logger, install_request_logging, set_level
from common.responses import fail, fail_from_exception, ok

from . import config as config_module
from .blueprints import register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

APP_NAME = "eUnits"
APP_VERSION = "1.0.0"
APP_FEATURES = (
    "Supports multiple categories",
    "Fixed presentation order for unit selectors",
    "Fixed-point results ready to copy",
)

logger = get_logger("eunits.app")


def _load_yaml_config(path: Path = CONFIG_PATH) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _discover_plugins(package: str = "plugins") -> Iterable[str]:
    """Yield import paths for all plugin packages."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _load_manifests(plugin_settings: dict) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in _discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        overrides = plugin_settings.get(entry.get("blueprint"), {}) or {}
        if overrides.get("summary"):
            entry["summary"] = overrides["summary"]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)

    yaml_config = _load_yaml_config()
    site_settings = yaml_config.get("site", {}) or {}
    plugin_settings = yaml_config.get("plugins", {}) or {}
    app.config["SITE_SETTINGS"] = site_settings
    app.config["PLUGIN_SETTINGS"] = plugin_settings
    if site_settings.get("log_level") and "EUNITS_LOG_LEVEL" not in os.environ:
        app.config["LOG_LEVEL"] = site_settings["log_level"]

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj is None:
            raise ValueError(f"Unknown configuration '{config_name}'")
        app.config.from_object(config_obj)

    set_level(app.config["LOG_LEVEL"])
    install_request_logging(app)
    register_plugin_blueprints(app)
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(plugin_settings)

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.route("/")
    def home():
        return ok(
            {
                "site": app.config.get("SITE_SETTINGS", {}),
                "plugins": app.config.get("PLUGIN_MANIFESTS", []),
            }
        )

    @app.route("/about")
    def about():
        site = app.config.get("SITE_SETTINGS", {})
        return ok(
            {
                "name": site.get("title", APP_NAME),
                "version": APP_VERSION,
                "features": list(APP_FEATURES),
            }
        )

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return fail(error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if error.code == 404:
            return fail(NotFoundAppError(message="Resource not found"))
        return fail(
            ValidationAppError(
                message=error.description or error.name,
                code=f"http.{error.code}",
                status_code=error.code or 400,
            )
        )

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("unhandled error")
        return fail_from_exception(error)

    logger.info("%s ready with %d plugin(s)", APP_NAME, len(app.config["PLUGIN_MANIFESTS"]))
    return app


__all__ = ["create_app"]
