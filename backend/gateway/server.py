"""
API gateway: serves the analysis API, the health check, and the browser client.
This is the local entrypoint for development.
"""

import logging
import os
from typing import Optional, Tuple

from flask import Flask, abort, jsonify, request, send_from_directory, Response
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from backend.gateway.config import ServerConfig, load_config

# Basic console logging during API requests
logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")
logger = logging.getLogger(__name__)

FRONTEND_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        config (ServerConfig, optional): Server configuration. Loaded from
            the environment when omitted.

    Returns:
        Flask: The configured Flask application.
    """
    if config is None:
        config = load_config()

    app = Flask(__name__, static_folder=None)
    app.config["SERVER_CONFIG"] = config
    app.config["MAX_CONTENT_LENGTH"] = config.max_content_length

    # Any origin may call the API, the browser client included
    CORS(app)

    # --- REGISTER BLUEPRINTS ---
    from backend.ai_service.gemini_client import build_client
    from backend.ai_service.routes import ai_blueprint

    app.extensions["gemini_client"] = build_client(config)
    app.register_blueprint(ai_blueprint, url_prefix="/api")

    # --- ERROR HANDLERS ---
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException) -> Tuple[Response, int]:
        """
        Render framework errors (404, 405, 413, ...) as JSON.
        """
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_exception(e: Exception) -> Tuple[Response, int]:
        logger.exception("Unhandled backend error:")
        return jsonify({"error": str(e) or "Internal server error"}), 500

    # --- HEALTH CHECK ---
    @app.route("/health")
    def health() -> Tuple[Response, int]:
        """
        Health check endpoint. Reports whether the Gemini key is configured.
        """
        return jsonify({"status": "ok", "hasKey": config.has_key}), 200

    # --- FRONTEND ---
    @app.route("/", defaults={"path": ""}, methods=FRONTEND_METHODS)
    @app.route("/<path:path>", methods=FRONTEND_METHODS)
    def serve_frontend(path: str) -> Response:
        """
        Serve a static asset when one exists at the path, index.html otherwise.
        Non-GET requests that matched no API route are a 404.
        """
        if request.method not in ("GET", "HEAD"):
            abort(404)
        static_dir = config.static_dir
        if path and os.path.isfile(os.path.join(static_dir, path)):
            return send_from_directory(static_dir, path)
        return send_from_directory(static_dir, "index.html")

    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"AyurScan running at http://localhost:{config.port}")
    if not config.has_key:
        logger.warning("GEMINI_API_KEY is not set!")
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
