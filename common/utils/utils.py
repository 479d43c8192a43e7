import os
from typing import List
from flask import jsonify, abort
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000

DEFAULT_ORIGINS: List[str] = [
    "http://127.0.0.1:5500",
    "http://localhost:1234",
    "https://blablabla.com",
    "https://iap-dev.tech",
]


def json_abort(status_code, data=None):
    response = jsonify(data)
    response.status_code = status_code
    abort(response)


def get_port() -> int:
    return int(os.getenv("PORT") or DEFAULT_PORT)


def get_origins() -> List[str]:
    origins = os.getenv("ORIGINS")
    if not origins:
        return list(DEFAULT_ORIGINS)
    return [origin.strip() for origin in origins.split(",") if origin.strip()]


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
