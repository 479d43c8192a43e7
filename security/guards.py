from http import HTTPStatus

from flask import current_app, request

from common.utils.logging_service import logger
from common.utils.utils import json_abort

cors_error = {"message": "Not allowed by CORS"}


def is_origin_allowed(origin, allowed_origins) -> bool:
    # Same-origin requests carry no Origin header
    if not origin:
        return True
    return origin in allowed_origins


def origin_guard():
    """Reject cross-origin requests whose Origin is not in ``ORIGINS``."""
    origin = request.headers.get("Origin", None)

    if is_origin_allowed(origin, current_app.config["ORIGINS"]):
        return

    logger.warning("Rejected request from origin %s", origin)
    json_abort(HTTPStatus.FORBIDDEN, cors_error)
