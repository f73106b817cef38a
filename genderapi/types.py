"""
Type definitions for the GenderAPI client
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from genderapi.exceptions import ValidationError


class Endpoint(str, Enum):
    """Endpoint paths exposed by the service"""
    NAME = "/api"
    EMAIL = "/api/email"
    USERNAME = "/api/username"
    NAME_BULK = "/api/name/multi/country"
    EMAIL_BULK = "/api/email/multi/country"
    USERNAME_BULK = "/api/username/multi/country"


@dataclass(frozen=True)
class APICredentials:
    """API credentials held for the lifetime of a client"""
    api_key: str = field(repr=False)

    def authorization_header(self) -> str:
        return f"Bearer {self.api_key}"


@dataclass(frozen=True)
class FieldSpec:
    """One request field: keyword name, JSON name, and how it is validated"""
    param: str
    wire: str
    required: bool = False
    default: Any = None  # None means the key is omitted
    sequence: bool = False


@dataclass(frozen=True)
class OperationSpec:
    """Declarative description of one service operation"""
    name: str
    path: Endpoint
    fields: Tuple[FieldSpec, ...]
    max_items: Optional[int] = None  # provider-side bulk limit, not enforced here

    @property
    def is_bulk(self) -> bool:
        return any(f.sequence for f in self.fields)

    def validate(self, **params) -> None:
        """
        Check caller parameters against the field specs

        Raises:
            ValidationError: Unknown parameter, missing or empty required field,
                or a sequence field that is not a list or tuple
        """
        known = {f.param for f in self.fields}
        unknown = sorted(set(params) - known)
        if unknown:
            raise ValidationError(
                f"{self.name} got unexpected parameter(s): {', '.join(unknown)}",
                field=unknown[0],
            )

        for spec in self.fields:
            value = params.get(spec.param)

            if spec.sequence and value is not None and not isinstance(value, (list, tuple)):
                raise ValidationError(
                    f"{spec.param} must be a list of records, got {type(value).__name__}",
                    field=spec.param,
                )

            if spec.required and _is_empty(value):
                raise ValidationError(f"{spec.param} is required for {self.name}", field=spec.param)

    def build_payload(self, **params) -> "Payload":
        """Map keyword parameters to a request payload, applying defaults"""
        payload = {}
        for spec in self.fields:
            value = params.get(spec.param)
            if value is None:
                value = spec.default
            payload[spec.wire] = list(value) if spec.sequence and value is not None else value
        return payload

    def exceeds_limit(self, **params) -> bool:
        if self.max_items is None:
            return False
        return any(
            spec.sequence and len(params.get(spec.param) or ()) > self.max_items
            for spec in self.fields
        )


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, Mapping)):
        return len(value) == 0
    return False


# Type aliases for common patterns
Payload = Dict[str, Any]
BulkRecord = Dict[str, Any]
RequestHeaders = Dict[str, str]
# Usually an object or array; any JSON value the service returns is passed through
ResponseData = Any
