"""Flask application factory for the ExiFrame web API."""

import logging
from typing import Optional

from flask import Flask

from ..config import ConfigManager
from ..render import FrameRenderer

logger = logging.getLogger(__name__)


def create_app(
    config_path: Optional[str] = None,
    debug: bool = False,
    config: Optional[ConfigManager] = None
) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_path: Optional path to ExiFrame config file
        debug: Enable debug mode
        config: Already loaded configuration (takes precedence over config_path)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config["DEBUG"] = debug

    if config is None:
        try:
            config = ConfigManager.load(config_path=config_path)
        except Exception as e:
            logger.error(f"Failed to load ExiFrame config: {e}")
            raise

    app.config["EXIFRAME_CONFIG"] = config
    app.config["EXIFRAME_RENDERER"] = FrameRenderer.from_config(config)
    app.config["MAX_CONTENT_LENGTH"] = config.get("web.max_upload_mb", 50) * 1024 * 1024
    logger.info(f"Loaded ExiFrame config from: {config.config_path or 'defaults'}")

    from .routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info("ExiFrame web app created")

    return app
