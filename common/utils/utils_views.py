from flask import Blueprint, jsonify

from movies.movies_service import get_store


bp_name = "utils"
bp_url_prefix = ""
bp = Blueprint(bp_name, __name__, url_prefix=bp_url_prefix)


@bp.route("/health", methods=["GET"])
def health_check():
    return jsonify(
        {
            "status": "up",
            "movies": len(get_store()),
        }
    )
