from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .auth.controller import register as register_auth
from .container import GatewayFactory, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.exceptions import ConfigurationError
from .dashboards.controller import register as register_dashboards
from .remote.connection import SupabaseConfig

logger = logging.getLogger("employee_system")


def configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("employee_system").setLevel(level)
    # supabase-py's HTTP stack is chatty at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def warn_if_unconfigured(config: SupabaseConfig) -> Optional[ConfigurationError]:
    missing = config.missing_settings()
    if not missing:
        return None
    err = ConfigurationError(
        f"Supabase URL or anon key is missing ({', '.join(missing)}). "
        "Check your .env file; every remote call will fail until they are set."
    )
    logger.warning("%s", err)
    return err


def create_app(*, gateway_factory: Optional[GatewayFactory] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    supabase_config = getattr(settings, "SUPABASE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(supabase_config=supabase_config, gateway_factory=gateway_factory)
    app.config["CONFIGURATION_ERROR"] = warn_if_unconfigured(container.conn.config)

    logger.info(
        "settings=%s supabase=%s",
        settings_module,
        container.conn.config.url or "<unset>",
    )

    register_auth(app, container)
    register_dashboards(app, container)

    return app
