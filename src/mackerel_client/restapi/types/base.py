"""Shared building blocks for the Mackerel API models.

Every resource model derives from :class:`MackerelModel`, which maps
snake_case attributes to the camelCase JSON fields used by the API and
ignores fields it does not know about. Enumerated string fields use
:class:`OpenStrEnum` so that values introduced by the API after a client
release still decode.
"""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema

OTHER_MEMBER_NAME = "OTHER"


class _OmitEmpty:
    """Field marker: drop the field from outbound JSON when it is falsy."""

    def __repr__(self) -> str:
        return "OmitEmpty"


OmitEmpty = _OmitEmpty()


def to_utc_seconds(value: datetime) -> datetime:
    """Normalize a datetime to UTC at whole-second precision.

    Naive datetimes are taken to be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).replace(microsecond=0)


def epoch_seconds(value: datetime) -> int:
    """Integer epoch seconds of a datetime, naive values taken as UTC."""
    return int(to_utc_seconds(value).timestamp())


# The API exchanges timestamps as integer epoch seconds.
Timestamp = Annotated[
    datetime,
    AfterValidator(to_utc_seconds),
    PlainSerializer(epoch_seconds, return_type=int),
]


class MackerelModel(BaseModel):
    """Base model for all API resources.

    Attributes are exposed in snake_case and (de)serialized under their
    camelCase alias. Unknown JSON fields are ignored on input, ``None``
    fields are left out of request bodies by the request builder, and
    fields annotated with :data:`OmitEmpty` are left out when empty.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # The API sends null for unset fields that have a non-null default here
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if not field.is_required() and field.default is not None:
                defaulted.update((name, field.alias or name))
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in defaulted
        }

    @model_serializer(mode="wrap")
    def _omit_empty_fields(
        self,
        handler: SerializerFunctionWrapHandler,
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if OmitEmpty in field.metadata and not getattr(self, name):
                data.pop(name, None)
                if field.alias:
                    data.pop(field.alias, None)
        return data


class OpenStrEnum(StrEnum):
    """String enum that accepts values it does not declare.

    An unrecognized value becomes a pseudo-member named ``OTHER`` whose
    ``value`` is the raw string, so it serializes back unchanged.
    """

    @classmethod
    def _missing_(cls, value: object) -> "OpenStrEnum | None":
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = OTHER_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        """Whether this value is one of the declared members."""
        return self._name_ in type(self).__members__

    @classmethod
    def _coerce(cls, value: Any) -> "OpenStrEnum":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"{cls.__name__} expects a string, got {type(value).__name__}"
            raise ValueError(msg)  # noqa: TRY004
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value,
            ),
        )
