"""Unit converter API with standardized responses."""

from __future__ import annotations

import pydantic
from flask import Blueprint, Response, current_app, request
from flask.blueprints import BlueprintSetupState

from common.errors import AppError, NotFoundAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model, setting_int

from ..core import (
    CATALOG_VERSION,
    ConversionError,
    ConversionRequest,
    InvalidValueError,
    UnknownCategoryError,
    UnknownUnitError,
    convert_request,
    convert_text,
    get_catalog,
    list_categories,
    list_unit_names,
    list_units,
    validate,
)

DEFAULT_MAX_INPUT_LENGTH = 64


class RawInputModel(SchemaModel):
    # Raw text is judged as typed; stripping would let " 42" through.
    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=False)


class ValidatePayload(RawInputModel):
    value: str


class ConvertPayload(RawInputModel):
    value: pydantic.StrictFloat | pydantic.StrictInt | pydantic.StrictStr
    category: str
    from_unit: str
    to_unit: str


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")
logger = get_logger("unit_converter.api")


@api_bp.record_once
def _load_catalog(state: BlueprintSetupState) -> None:
    # A malformed catalog must stop the application from starting.
    get_catalog()


def _max_input_length() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {})
    return setting_int(settings, "max_input_length", DEFAULT_MAX_INPUT_LENGTH)


def _engine_error(exc: ConversionError) -> AppError:
    if isinstance(exc, UnknownCategoryError):
        return ValidationAppError(
            message=str(exc),
            code="unit.unknown_category",
            details={"category": exc.category},
        )
    if isinstance(exc, UnknownUnitError):
        return ValidationAppError(
            message=str(exc),
            code="unit.unknown_unit",
            details={"category": exc.category, "unit": exc.unit},
        )
    if isinstance(exc, InvalidValueError):
        return ValidationAppError(message=str(exc), code="unit.invalid_value")
    return ValidationAppError(message=str(exc), code="unit.conversion_failed")


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="unit.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


@api_bp.get("/categories")
def categories() -> Response:
    return ok({"categories": list_categories(), "version": CATALOG_VERSION})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except UnknownCategoryError as exc:
        return fail(NotFoundAppError(message=str(exc), code="unit.unknown_category"))
    return ok({"category": category, "units": units})


@api_bp.get("/units/<category>/names")
def unit_names_endpoint(category: str) -> Response:
    try:
        names = list_unit_names(category)
    except UnknownCategoryError as exc:
        return fail(NotFoundAppError(message=str(exc), code="unit.unknown_category"))
    return ok({"category": category, "units": names})


@api_bp.post("/validate")
def validate_endpoint() -> Response:
    try:
        payload = parse_model(ValidatePayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    valid = len(payload.value) <= _max_input_length() and validate(payload.value)
    return ok({"value": payload.value, "valid": valid})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    try:
        payload = parse_model(ConvertPayload, request.get_json(silent=True))
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        if isinstance(payload.value, str):
            if len(payload.value) > _max_input_length():
                raise InvalidValueError("Value string is too long.")
            result = convert_text(
                payload.value, payload.category, payload.from_unit, payload.to_unit
            )
        else:
            result = convert_request(
                ConversionRequest(
                    category=payload.category,
                    from_unit=payload.from_unit,
                    to_unit=payload.to_unit,
                    value=payload.value,
                )
            )
    except ConversionError as exc:
        logger.info("conversion rejected: %s", exc)
        return fail(_engine_error(exc))
    return ok(result.to_dict())


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "unit_names_endpoint",
    "validate_endpoint",
    "convert_endpoint",
]
