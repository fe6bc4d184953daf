"""
Validation contract for book request bodies.

The contract is a pair of static JSON-Schema-like documents: one for
creation (every field required) and one for partial updates (no field
required, but at least one mutable field must be present). Type checks
are delegated to Pydantic models generated from the documents; the
errors are rendered as one human-readable violation string each.

Violation order is stable: object check, any-of check, missing required
properties, then wrong types, fields in declaration order.
"""

from typing import Annotated, Any

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Strict,
    StrictStr,
    ValidationError,
    create_model,
)

from bookcatalog.domain.books.entities import MUTABLE_FIELDS
from bookcatalog.domain.books.errors import BookValidationError

BOOK_SCHEMA: dict[str, Any] = {
    "title": "Book",
    "type": "object",
    "properties": {
        "isbn": {"type": "string"},
        "amazon_url": {"type": "string"},
        "author": {"type": "string"},
        "language": {"type": "string"},
        "pages": {"type": "number"},
        "publisher": {"type": "string"},
        "title": {"type": "string"},
        "year": {"type": "number"},
    },
    "required": [
        "isbn",
        "amazon_url",
        "author",
        "language",
        "pages",
        "publisher",
        "title",
        "year",
    ],
}

BOOK_UPDATE_SCHEMA: dict[str, Any] = {
    "title": "BookUpdate",
    "type": "object",
    "properties": {name: BOOK_SCHEMA["properties"][name] for name in MUTABLE_FIELDS},
    "anyOf": [{"required": [name]} for name in MUTABLE_FIELDS],
}

# Strict so that "264" is not a number and true is neither a number
# nor a string. Strict floats still accept JSON integers. NaN and
# Infinity are not JSON numbers and cannot be stored in INTEGER columns.
_TYPE_ANNOTATIONS: dict[str, Any] = {
    "string": StrictStr,
    "number": Annotated[float, Strict(), AllowInfNan(False)],
}

_models: dict[str, type[BaseModel]] = {}


def _build_model(schema: dict[str, Any]) -> type[BaseModel]:
    """Generate a Pydantic model mirroring the schema's properties."""
    required = set(schema.get("required", []))
    field_definitions: dict[str, Any] = {}
    for name, prop in schema["properties"].items():
        annotation = _TYPE_ANNOTATIONS[prop["type"]]
        default = ... if name in required else None
        field_definitions[name] = (annotation, default)
    return create_model(
        f"{schema['title']}Contract",
        __config__=ConfigDict(extra="ignore"),
        **field_definitions,
    )


def _model_for(schema: dict[str, Any]) -> type[BaseModel]:
    model = _models.get(schema["title"])
    if model is None:
        model = _models[schema["title"]] = _build_model(schema)
    return model


def _any_of_violation(instance: dict[str, Any], branches: list[dict[str, Any]]) -> str | None:
    for branch in branches:
        if all(name in instance for name in branch.get("required", [])):
            return None
    labels = ",".join(f"[subschema {i}]" for i in range(len(branches)))
    return f"instance is not any of {labels}"


def validate(instance: Any, schema: dict[str, Any]) -> list[str]:
    """Check an instance against a schema document.

    Args:
        instance: The decoded JSON body.
        schema: BOOK_SCHEMA, BOOK_UPDATE_SCHEMA or a document of the same
            shape.

    Returns:
        Every violation found, empty when the instance is valid.
    """
    if not isinstance(instance, dict):
        return [f"instance is not of a type(s) {schema['type']}"]

    violations: list[str] = []

    if "anyOf" in schema:
        violation = _any_of_violation(instance, schema["anyOf"])
        if violation:
            violations.append(violation)

    try:
        _model_for(schema).model_validate(instance)
    except ValidationError as exc:
        missing: list[str] = []
        mistyped: list[str] = []
        for error in exc.errors():
            name = str(error["loc"][0])
            if error["type"] == "missing":
                missing.append(name)
            elif name not in mistyped:
                mistyped.append(name)
        violations.extend(f'instance requires property "{name}"' for name in missing)
        violations.extend(
            f"instance.{name} is not of a type(s) {schema['properties'][name]['type']}"
            for name in mistyped
        )

    return violations


def validate_book(instance: Any, schema: dict[str, Any]) -> dict[str, Any]:
    """Validate a request body and keep only the schema's properties.

    Raises:
        BookValidationError: With the full list of violations.
    """
    violations = validate(instance, schema)
    if violations:
        raise BookValidationError(violations)
    return {name: instance[name] for name in schema["properties"] if name in instance}
