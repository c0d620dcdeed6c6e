"""Listing, describing and altering brokers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol, TextIO

import yaml

from kafkactl.output import KafkactlError, TableWriter, print_object

_log = logging.getLogger(__name__)


@dataclass
class Config:
    """A configuration entry."""

    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass
class Broker:
    """A broker with its id, address and non-default configs."""

    id: int
    address: str
    configs: list[Config] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "address": self.address}
        if self.configs:
            data["configs"] = [c.to_dict() for c in self.configs]
        return data


@dataclass
class GetBrokersFlags:
    output_format: str = ""


@dataclass
class DescribeBrokerFlags:
    output_format: str = ""


@dataclass
class AlterBrokerFlags:
    validate_only: bool = False
    configs: list[str] = field(default_factory=list)


class _ClusterBroker(Protocol):
    id: int
    address: str


class _Client(Protocol):
    def brokers(self) -> Iterable[_ClusterBroker]: ...


class _ConfigEntry(Protocol):
    name: str
    value: str
    default: bool


class _Admin(Protocol):
    def describe_broker_config(self, broker_id: str) -> Iterable[_ConfigEntry]: ...

    def alter_broker_config(
        self, broker_id: str, entries: dict[str, Optional[str]], validate_only: bool
    ) -> None: ...


class BrokerOperations:
    """Broker commands run against a cluster client and admin.

    The client's brokers() yields objects with id and address; the admin's
    describe_broker_config(id) yields entries with name, value and default.
    """

    def __init__(self, client: _Client, admin: _Admin, stream: Optional[TextIO] = None) -> None:
        self.client = client
        self.admin = admin
        self.stream = stream

    def _configs(self, broker_id: str) -> list[Config]:
        return [
            Config(entry.name, entry.value)
            for entry in self.admin.describe_broker_config(broker_id)
            if not entry.default
        ]

    def _write(self, text: str) -> None:
        self._stream().write(text + "\n")

    def _stream(self) -> TextIO:
        import sys

        return self.stream if self.stream is not None else sys.stdout

    def get_brokers(self, flags: GetBrokersFlags) -> list[Broker]:
        """List all brokers sorted by id and print them."""
        output_format = flags.output_format
        table = TableWriter(self.stream)
        if output_format == "":
            table.write_header("ID", "ADDRESS")
        elif output_format == "compact":
            table.initialize()
        elif output_format not in ("json", "yaml"):
            raise KafkactlError(f"unknown outputFormat: {output_format}")

        brokers = sorted(
            (
                Broker(b.id, b.address, self._configs(str(b.id)))
                for b in self.client.brokers()
            ),
            key=lambda b: b.id,
        )

        if output_format in ("json", "yaml"):
            print_object(brokers, output_format, self.stream)
            return brokers

        for broker in brokers:
            if output_format == "compact":
                table.write(broker.address)
            else:
                table.write(str(broker.id), broker.address)
        table.flush()
        return brokers

    def describe_broker(self, broker_id: int, flags: DescribeBrokerFlags) -> Broker:
        """Print the address and non-default configs of one broker."""
        found = next((b for b in self.client.brokers() if b.id == broker_id), None)
        if found is None:
            raise KafkactlError(f"cannot find broker with id: {broker_id}")

        info = Broker(found.id, found.address, self._configs(str(found.id)))

        if flags.output_format in ("json", "yaml"):
            print_object(info, flags.output_format, self.stream)
            return info
        if flags.output_format not in ("", "wide"):
            raise KafkactlError(f"unknown outputFormat: {flags.output_format}")

        table = TableWriter(self.stream)
        table.write_header("ID", "ADDRESS")
        table.write(str(info.id), info.address)
        table.flush()

        self._write("")

        table.write_header("CONFIG", "VALUE")
        for config in info.configs:
            table.write(config.name, config.value)
        table.flush()
        return info

    def alter_broker(self, broker_id: str, flags: AlterBrokerFlags) -> dict[str, Optional[str]]:
        """Alter broker configs given as key=value; return the entries sent."""
        found = next((b for b in self.client.brokers() if str(b.id) == broker_id), None)
        if broker_id and found is None:
            raise KafkactlError(f"cannot find broker with id: {broker_id}")

        configs = self._configs(broker_id)
        merged: dict[str, Optional[str]] = {}

        if flags.configs:
            for config in flags.configs:
                parts = config.split("=")
                if len(parts) != 2:
                    continue
                key, value = parts
                if value:
                    merged[key] = value
                else:
                    merged.pop(key, None)

            try:
                self.admin.alter_broker_config(broker_id, merged, flags.validate_only)
            except Exception as exc:
                raise KafkactlError(
                    f"Could not alter broker config '{broker_id}': {exc}"
                ) from exc
            if not flags.validate_only:
                self._write("config has been altered")

        if flags.validate_only:
            for config in configs:
                self._write(f"{config.name}={config.value}")
        return merged

    def list_broker_ids(self) -> list[str]:
        """Ids of all brokers, as strings."""
        return [str(b.id) for b in self.client.brokers()]


def from_yaml(yaml_string: str) -> Broker:
    """Parse a broker printed in yaml format."""
    data = yaml.safe_load(yaml_string)
    if data is None:
        return Broker(0, "")
    if not isinstance(data, dict):
        raise KafkactlError("expected a broker mapping")
    return Broker(
        id=int(data.get("id", 0)),
        address=str(data.get("address", "")),
        configs=[
            Config(str(c.get("name", "")), str(c.get("value", "")))
            for c in data.get("configs") or []
        ],
    )