"""Schema registry access with a cached subject list and wire-format helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Protocol

WIRE_FORMAT_BYTES = 5
MAGIC_BYTE = 0


class SchemaType(str, Enum):
    AVRO = "AVRO"
    PROTOBUF = "PROTOBUF"
    JSON = "JSON"


class SchemaRegistryError(Exception):
    """A schema registry request or a message's wire format failed."""


class _Schema(Protocol):
    schema_type: Optional[SchemaType]


class _Client(Protocol):
    def get_subjects(self) -> list[str]: ...

    def get_latest_schema(self, subject: str) -> Any: ...


class CachingSchemaRegistry:
    """Wraps a registry client and remembers the list of subjects.

    The client provides get_subjects() and get_latest_schema(subject); the
    latter returns an object whose schema_type is a SchemaType or None.
    """

    def __init__(self, client: _Client) -> None:
        self.client = client
        self._subjects: list[str] = []

    def get_subjects(self) -> list[str]:
        """Return the registry's subjects, fetching them only until one is known."""
        if not self._subjects:
            self._subjects = list(self.client.get_subjects())
        return self._subjects

    def subject_of_type_exists(self, subject: str, expected_schema_type: SchemaType) -> bool:
        """Whether the subject exists and its latest schema has the given type."""
        try:
            subjects = self.get_subjects()
        except Exception as exc:
            raise SchemaRegistryError(f"failed to list available schemas: {exc}") from exc

        if subject not in subjects:
            return False

        try:
            schema = self.client.get_latest_schema(subject)
        except Exception as exc:
            raise SchemaRegistryError(
                f"failed to retrieve latest schema for subject {subject}: {exc}"
            ) from exc

        schema_type = schema.schema_type
        if schema_type is None:
            return expected_schema_type == SchemaType.AVRO
        return schema_type == expected_schema_type

    def extract_schema_id(self, data: bytes) -> int:
        """Read the schema id from a message in the registry wire format."""
        if len(data) < WIRE_FORMAT_BYTES:
            raise SchemaRegistryError(
                f"data too short. cannot extra schema id from message (len = {len(data)})"
            )
        if data[0] != MAGIC_BYTE:
            raise SchemaRegistryError(
                f"confluent serialization format version number was {data[0]} != 0"
            )
        schema_id = int.from_bytes(data[1:WIRE_FORMAT_BYTES], "big")
        if schema_id == 0:
            raise SchemaRegistryError("schema id is 0")
        return schema_id

    def extract_payload(self, data: bytes) -> bytes:
        """Return the message body after the wire-format header."""
        return data[WIRE_FORMAT_BYTES:]