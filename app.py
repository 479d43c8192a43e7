import os
from apispec import APISpec
from flask_apispec import FlaskApiSpec
from flask_cors import CORS
from flask_talisman import Talisman
from flask import Flask
import logging
import sys

from common.utils.logging_service import (
    LOG_FORMAT,
    get_log_level,
    logger,
    set_log_level,
)
from common.utils.utils import env_flag, get_origins, get_port
from common.utils.utils_views import bp as utils_bp
from movies.movies_service import (
    DEFAULT_SEED_FILE,
    STORE_EXTENSION_KEY,
    load_seed_movies,
)
from movies.movies_store import MovieStore
from movies.movies_views import bp as movies_bp, view_functions as movies_views
from security.guards import origin_guard
import exceptions_views
from apispec.ext.marshmallow import MarshmallowPlugin

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],  # Log to stdout
)


def create_app(config=None, store=None):
    app = Flask(__name__, instance_relative_config=True)

    app.config.update(
        {
            "APISPEC_SPEC": APISpec(
                title="Movies API",
                version="v1",
                plugins=[MarshmallowPlugin()],
                openapi_version="3.0.2",
            ),
            "APISPEC_SWAGGER_URL": "/swagger/",  # JSON
            "APISPEC_SWAGGER_UI_URL": "/swagger-ui/",  # UI
        }
    )

    app.config.update(
        PORT=get_port(),
        ORIGINS=get_origins(),
        FORCE_HTTPS=env_flag("FORCE_HTTPS"),
        LOG_LEVEL=get_log_level(),
        MOVIES_SEED_FILE=os.getenv("MOVIES_SEED_FILE", str(DEFAULT_SEED_FILE)),
    )

    if config:
        app.config.update(config)

    set_log_level(app.config["LOG_LEVEL"])

    csp = {"default-src": ["'self'"], "frame-ancestors": ["'none'"]}
    Talisman(
        app,
        force_https=app.config["FORCE_HTTPS"],
        frame_options="DENY",
        content_security_policy=csp,
        referrer_policy="no-referrer",
        x_content_type_options=True,
        strict_transport_security=app.config["FORCE_HTTPS"],
    )

    @app.after_request
    def add_no_cache(response):
        response.headers["Cache-Control"] = "no-store, max-age=0, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    if store is None:
        store = MovieStore(load_seed_movies(app.config["MOVIES_SEED_FILE"]))
    app.extensions[STORE_EXTENSION_KEY] = store

    app.before_request(origin_guard)
    CORS(app, origins=app.config["ORIGINS"])

    app.register_blueprint(movies_bp)
    app.register_blueprint(utils_bp)
    app.register_blueprint(exceptions_views.bp)

    app.logger.handlers = logging.getLogger().handlers
    app.logger.setLevel(app.config["LOG_LEVEL"])

    docs = FlaskApiSpec(app)
    for endpoint, view in movies_views.items():
        docs.register(view, blueprint=movies_bp.name, endpoint=endpoint)

    return app


app = create_app()

if __name__ == "__main__":
    logger.info("Server listening on http://localhost:%s", app.config["PORT"])
    app.run(port=app.config["PORT"], debug=env_flag("FLASK_DEBUG"))
