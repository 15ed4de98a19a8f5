"""Input field-name normalization shared by the request schemas.

Clients send either snake_case or camelCase names (``status_key`` or
``statusKey``). Each request model declares, per canonical field, the
accepted spellings in precedence order; the raw body is rewritten to the
canonical names once, before any field validation runs.

Integer inputs that end up in database columns share the bounded,
boolean-rejecting types defined here.
"""

from typing import Annotated, Any, ClassVar, Dict, Mapping, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

FieldAliases = Mapping[str, Tuple[str, ...]]

# Range of an INTEGER column on PostgreSQL; SQLite accepts a superset
MIN_DB_INTEGER = -(2 ** 31)
MAX_DB_INTEGER = 2 ** 31 - 1


def reject_bool(value: Any) -> Any:
    """Refuse JSON booleans where an integer is expected.

    ``bool`` subclasses ``int``, so without this ``true`` would validate as ``1``.
    """
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer, not a boolean")
    return value


RecordId = Annotated[int, Field(ge=1, le=MAX_DB_INTEGER), BeforeValidator(reject_bool)]
Position = Annotated[int, Field(ge=0, le=MAX_DB_INTEGER), BeforeValidator(reject_bool)]


def to_camel(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def normalize_field_names(data: Any, aliases: FieldAliases) -> Any:
    """Rewrite ``data`` so every aliased field appears under its canonical name only.

    Args:
        data: Raw request body. Anything that is not a mapping is returned
            unchanged and left for the model to reject.
        aliases: Canonical name -> accepted spellings, highest precedence first.

    Returns:
        A new dict with the winning spelling stored under the canonical name
        and every other spelling removed.
    """
    if not isinstance(data, Mapping):
        return data

    normalized: Dict[str, Any] = dict(data)
    for canonical, spellings in aliases.items():
        for spelling in spellings:
            if spelling in data:
                value = data[spelling]
                break
        else:
            continue

        for spelling in spellings:
            normalized.pop(spelling, None)
        normalized[canonical] = value

    return normalized


def camel_aliases(*fields: str) -> Dict[str, Tuple[str, ...]]:
    """Alias table where the camelCase spelling wins over snake_case."""
    return {field: (to_camel(field), field) for field in fields if to_camel(field) != field}


class RequestModel(BaseModel):
    """Base for request bodies: strips string whitespace and applies field aliases."""

    model_config = ConfigDict(str_strip_whitespace=True)

    field_aliases: ClassVar[FieldAliases] = {}

    @model_validator(mode="before")
    @classmethod
    def _normalize_field_names(cls, data: Any) -> Any:
        return normalize_field_names(data, cls.field_aliases)
