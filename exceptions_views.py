from flask import Blueprint, jsonify, make_response
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from common.utils.logging_service import logger

bp_name = "exceptions"
bp = Blueprint(bp_name, __name__)


@bp.app_errorhandler(NotFound)
def handle_not_found(error):
    return make_response(jsonify({"message": "Not found"}), 404)


@bp.app_errorhandler(MethodNotAllowed)
def handle_method_not_allowed(error):
    return make_response(jsonify({"message": "Method not allowed"}), 405)


@bp.app_errorhandler(HTTPException)
def handle_http_exception(error: HTTPException):
    return make_response(jsonify({"message": error.description}), error.code)


@bp.app_errorhandler(Exception)
def handle_unexpected_exception(error):
    logger.exception("Unhandled error: %s", error)
    return make_response(jsonify({"message": "Internal Server Error"}), 500)
