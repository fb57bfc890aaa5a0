import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from src.deck_generation.config import ServiceConfig
from src.web import get_blueprint

DEFAULT_PORT = int(os.environ.get("FLASK_PORT", "3000"))
DEFAULT_HOST = os.environ.get("FLASK_HOST", "127.0.0.1")
MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "20"))


def create_app(config: Optional[ServiceConfig] = None, service=None) -> Flask:
    """Build the Flask app.

    The service config is created once here and stored on ``app.config``;
    the remote client (``service``) is created on first request unless one
    is passed in.
    """
    load_dotenv()
    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024
    app.config["DECK_SERVICE_CONFIG"] = config or ServiceConfig.from_env()
    if service is not None:
        app.extensions["deck_slides_service"] = service
    app.register_blueprint(get_blueprint())
    return app


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    app = create_app()
    app.run(host=DEFAULT_HOST, port=DEFAULT_PORT, debug=os.environ.get("FLASK_DEBUG") == "1")
