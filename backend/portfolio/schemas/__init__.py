# portfolio/schemas/__init__.py
from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from portfolio.domain.errors import ValidationFailed

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_payload(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a request body against a schema.

    Raises ValidationFailed with one {"field", "message"} entry per problem.
    """
    if data is None:
        raise ValidationFailed([
            {"field": "body", "message": "Request body must be a JSON object"}
        ])

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed([
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in exc.errors()
        ]) from exc
