"""
Validation of movie payloads.

Each field has its own validator returning the normalized value together with
the errors found for that field. ``validate_movie`` and
``validate_partial_movie`` run the field validators in schema order and
collect every error into one ``ValidationResult``.
"""

import math
from typing import Any, Callable, Dict, List, Tuple

from marshmallow import ValidationError, validate

from movies.model.genre import GENRE_NAMES
from movies.model.validation_result import FieldError, ValidationResult

MIN_YEAR = 1900
MAX_YEAR = 2024
MIN_RATE = 0
MAX_RATE = 10
DEFAULT_RATE = 5

FieldCheck = Tuple[Any, List[FieldError]]

_url_validator = validate.URL(relative=False, require_tld=False)


def _error(path, message: str, code: str) -> FieldError:
    if not isinstance(path, list):
        path = [path]
    return FieldError(path=path, message=message, code=code)


def _check_string(name: str, value: Any) -> FieldCheck:
    if not isinstance(value, str):
        return None, [_error(name, f"Movie {name} must be a string", "invalid_type")]
    return value, []


def _check_number(name: str, value: Any, integer: bool = False) -> FieldCheck:
    # booleans are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None, [_error(name, f"Movie {name} must be a number", "invalid_type")]

    if isinstance(value, float) and not math.isfinite(value):
        return None, [_error(name, f"Movie {name} must be a number", "invalid_type")]

    if integer and isinstance(value, float):
        if not value.is_integer():
            return None, [
                _error(name, f"Movie {name} must be an integer", "not_integer")
            ]
        value = int(value)

    return value, []


def _check_range(name: str, value, minimum=None, maximum=None) -> FieldCheck:
    if minimum is not None and value < minimum:
        return None, [
            _error(
                name,
                f"Movie {name} must be greater than or equal to {minimum}",
                "too_small",
            )
        ]
    if maximum is not None and value > maximum:
        return None, [
            _error(
                name,
                f"Movie {name} must be less than or equal to {maximum}",
                "too_big",
            )
        ]
    return value, []


def validate_title(value: Any) -> FieldCheck:
    title, errors = _check_string("title", value)
    if errors:
        return None, errors
    if not title:
        return None, [_error("title", "Movie title must not be empty", "too_small")]
    return title, []


def validate_year(value: Any) -> FieldCheck:
    year, errors = _check_number("year", value, integer=True)
    if errors:
        return None, errors
    return _check_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_director(value: Any) -> FieldCheck:
    return _check_string("director", value)


def validate_duration(value: Any) -> FieldCheck:
    duration, errors = _check_number("duration", value, integer=True)
    if errors:
        return None, errors
    if duration <= 0:
        return None, [
            _error("duration", "Movie duration must be a positive number", "too_small")
        ]
    return duration, []


def validate_poster(value: Any) -> FieldCheck:
    poster, errors = _check_string("poster", value)
    if errors:
        return None, errors
    try:
        _url_validator(poster)
    except ValidationError:
        return None, [
            _error("poster", "Movie poster must be a valid URL", "invalid_string")
        ]
    return poster, []


def validate_genre(value: Any) -> FieldCheck:
    if not isinstance(value, list):
        return None, [
            _error(
                "genre", "Movie genre must be an array of enum Genre", "invalid_type"
            )
        ]

    errors = [
        _error(
            ["genre", index],
            "Movie genre must be one of the allowed ones",
            "invalid_enum_value",
        )
        for index, entry in enumerate(value)
        if not isinstance(entry, str) or entry not in GENRE_NAMES
    ]
    if errors:
        return None, errors
    return list(value), []


def validate_rate(value: Any) -> FieldCheck:
    rate, errors = _check_number("rate", value)
    if errors:
        return None, errors
    return _check_range("rate", rate, MIN_RATE, MAX_RATE)


# Schema order, which is also the order errors are reported in.
FIELD_VALIDATORS: Dict[str, Callable[[Any], FieldCheck]] = {
    "title": validate_title,
    "year": validate_year,
    "director": validate_director,
    "duration": validate_duration,
    "poster": validate_poster,
    "genre": validate_genre,
    "rate": validate_rate,
}

FIELD_DEFAULTS: Dict[str, Any] = {"rate": DEFAULT_RATE}


def _validate(candidate: Any, partial: bool) -> ValidationResult:
    if not isinstance(candidate, dict):
        return ValidationResult.failure(
            [_error([], "Expected object", "invalid_type")]
        )

    data: Dict[str, Any] = {}
    errors: List[FieldError] = []

    for name, validator in FIELD_VALIDATORS.items():
        if name not in candidate:
            if partial:
                continue
            if name in FIELD_DEFAULTS:
                data[name] = FIELD_DEFAULTS[name]
            else:
                errors.append(_error(name, f"Movie {name} is required", "required"))
            continue

        value, field_errors = validator(candidate[name])
        if field_errors:
            errors.extend(field_errors)
        else:
            data[name] = value

    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(data)


def validate_movie(candidate: Any) -> ValidationResult:
    """Validate a complete movie payload, applying the default rate."""
    return _validate(candidate, partial=False)


def validate_partial_movie(candidate: Any) -> ValidationResult:
    """Validate only the fields present in ``candidate``. No defaults apply."""
    return _validate(candidate, partial=True)
