"""Listing, creating and deleting access control lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol, TextIO

import yaml

from kafkactl.acltypes import (
    Acl,
    AclFilter,
    AclPermissionType,
    AclResourceType,
    MatchingAcl,
    Resource,
    ResourceAcls,
    operation_from_string,
    operation_to_string,
    pattern_type_from_string,
    pattern_type_to_string,
    permission_type_to_string,
    resource_type_to_string,
)
from kafkactl.output import KafkactlError, TableWriter, print_object

_log = logging.getLogger(__name__)

_TABLE_HEADER = (
    "RESOURCE_TYPE",
    "RESOURCE_NAME",
    "PATTERN_TYPE",
    "PRINCIPAL",
    "HOST",
    "OPERATION",
    "PERMISSION_TYPE",
)


@dataclass
class AclEntry:
    """One ACL of a resource, in display form."""

    principal: str = ""
    host: str = ""
    operation: str = ""
    permission_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "principal": self.principal,
            "host": self.host,
            "operation": self.operation,
            "permissionType": self.permission_type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AclEntry":
        return cls(
            principal=str(data.get("principal", "")),
            host=str(data.get("host", "")),
            operation=str(data.get("operation", "")),
            permission_type=str(data.get("permissionType", "")),
        )


@dataclass
class ResourceAclEntry:
    """A resource with its ACLs, in display form."""

    resource_type: str = ""
    resource_name: str = ""
    pattern_type: str = ""
    acls: list[AclEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "resourceType": self.resource_type,
            "resourceName": self.resource_name,
            "patternType": self.pattern_type,
            "acls": [entry.to_dict() for entry in self.acls],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResourceAclEntry":
        return cls(
            resource_type=str(data.get("resourceType", "")),
            resource_name=str(data.get("resourceName", "")),
            pattern_type=str(data.get("patternType", "")),
            acls=[AclEntry.from_dict(item) for item in data.get("acls") or []],
        )


@dataclass
class GetAclFlags:
    output_format: str = ""
    filter_topic: str = ""
    operation: str = "any"
    resource_name: str = ""
    pattern_type: str = "any"
    principal: str = ""
    host: str = ""
    allow: bool = False
    deny: bool = False
    topics: bool = False
    groups: bool = False
    cluster: bool = False


@dataclass
class CreateAclFlags:
    principal: str = ""
    hosts: list[str] = field(default_factory=list)
    operations: list[str] = field(default_factory=list)
    allow: bool = False
    deny: bool = False
    topic: str = ""
    group: str = ""
    cluster: bool = False
    pattern_type: str = ""
    validate_only: bool = False


@dataclass
class DeleteAclFlags:
    validate_only: bool = False
    topics: bool = False
    groups: bool = False
    cluster: bool = False
    allow: bool = False
    deny: bool = False
    principal: str = ""
    host: str = ""
    operation: str = ""
    pattern_type: str = ""


class _Admin(Protocol):
    def list_acls(self, acl_filter: AclFilter) -> list[ResourceAcls]: ...

    def create_acl(self, resource: Resource, acl: Acl) -> None: ...

    def delete_acl(self, acl_filter: AclFilter, validate_only: bool) -> list[MatchingAcl]: ...


def xor(*args: bool) -> bool:
    """True when at least one value is true but not all of them."""
    return any(args) and not all(args)


def _permission_filter(allow: bool, deny: bool) -> AclPermissionType:
    if allow and deny:
        raise KafkactlError("--allow and --deny cannot be provided both")
    if deny:
        return AclPermissionType.DENY
    if allow:
        return AclPermissionType.ALLOW
    return AclPermissionType.ANY


def _entry_of(acl: Acl) -> AclEntry:
    return AclEntry(
        principal=acl.principal,
        host=acl.host,
        operation=operation_to_string(acl.operation),
        permission_type=permission_type_to_string(acl.permission_type),
    )


class AclOperations:
    """ACL commands run against a cluster admin client."""

    def __init__(self, admin: _Admin, stream: Optional[TextIO] = None) -> None:
        self.admin = admin
        self.stream = stream

    def get_acl(self, flags: GetAclFlags) -> list[ResourceAclEntry]:
        """List the ACLs matching the flags and print them."""
        operation = flags.operation
        if not operation:
            _log.debug("defaulting operation to: any")
            operation = "any"
        pattern_type = flags.pattern_type
        if not pattern_type:
            _log.debug("defaulting patternType to: any")
            pattern_type = "any"

        permission = _permission_filter(flags.allow, flags.deny)

        if flags.topics:
            resource_type = AclResourceType.TOPIC
        elif flags.groups:
            resource_type = AclResourceType.GROUP
        elif flags.cluster:
            resource_type = AclResourceType.CLUSTER
        else:
            resource_type = AclResourceType.ANY

        acl_filter = AclFilter(
            resource_type=resource_type,
            resource_name=flags.resource_name or None,
            resource_pattern_type=pattern_type_from_string(pattern_type),
            principal=flags.principal or None,
            host=flags.host or None,
            operation=operation_from_string(operation),
            permission_type=permission,
        )

        try:
            resource_acls = self.admin.list_acls(acl_filter)
        except Exception as exc:
            raise KafkactlError(f"failed to list acls: {exc}") from exc

        entries = [
            ResourceAclEntry(
                resource_type=resource_type_to_string(item.resource.resource_type),
                resource_name=item.resource.resource_name,
                pattern_type=pattern_type_to_string(item.resource.resource_pattern_type),
                acls=[_entry_of(acl) for acl in item.acls],
            )
            for item in resource_acls
        ]
        print_resource_acls(flags.output_format, entries, self.stream)
        return entries

    def create_acl(self, flags: CreateAclFlags) -> ResourceAclEntry:
        """Create one ACL per host and operation and print them."""
        if not flags.principal:
            raise KafkactlError("principal must be set")

        hosts = list(flags.hosts)
        if not hosts:
            _log.debug("no host specified. Using *")
            hosts = ["*"]

        if not flags.operations:
            raise KafkactlError("at least one operation has to be specified")
        if not xor(flags.allow, flags.deny):
            raise KafkactlError("either --allow or --deny has to be provided")
        if not xor(bool(flags.topic), bool(flags.group), flags.cluster):
            raise KafkactlError(
                "either --topic=topic-name or --group=group-name or --cluster has to be provided"
            )

        pattern = pattern_type_from_string(flags.pattern_type)
        if flags.topic:
            resource = Resource(AclResourceType.TOPIC, flags.topic, pattern)
        elif flags.group:
            resource = Resource(AclResourceType.GROUP, flags.group, pattern)
        else:
            resource = Resource(AclResourceType.CLUSTER, "kafka-cluster", pattern)

        permission = AclPermissionType.DENY if flags.deny else AclPermissionType.ALLOW

        acls = [
            Acl(
                principal=flags.principal,
                host=host,
                operation=operation_from_string(operation),
                permission_type=permission,
            )
            for host in hosts
            for operation in flags.operations
        ]

        entry = ResourceAclEntry(
            resource_type=resource_type_to_string(resource.resource_type),
            resource_name=resource.resource_name,
            pattern_type=pattern_type_to_string(resource.resource_pattern_type),
        )
        for acl in acls:
            if not flags.validate_only:
                try:
                    self.admin.create_acl(resource, acl)
                except Exception as exc:
                    raise KafkactlError(f"failed to create acl: {exc}") from exc
            entry.acls.append(_entry_of(acl))

        print_resource_acls("", [entry], self.stream)
        return entry

    def delete_acl(self, flags: DeleteAclFlags) -> list[ResourceAclEntry]:
        """Delete the ACLs matching the flags and print what matched."""
        if not flags.operation:
            raise KafkactlError("no operation has been specified")
        if not flags.pattern_type:
            raise KafkactlError("no pattern has been specified")

        permission = _permission_filter(flags.allow, flags.deny)

        if not xor(flags.topics, flags.groups, flags.cluster):
            raise KafkactlError("either --topic or --group or --cluster has to be provided")

        if flags.topics:
            resource_type = AclResourceType.TOPIC
        elif flags.groups:
            resource_type = AclResourceType.GROUP
        else:
            resource_type = AclResourceType.CLUSTER

        acl_filter = AclFilter(
            resource_type=resource_type,
            resource_pattern_type=pattern_type_from_string(flags.pattern_type),
            principal=flags.principal or None,
            host=flags.host or None,
            operation=operation_from_string(flags.operation),
            permission_type=permission,
        )

        try:
            matching = self.admin.delete_acl(acl_filter, flags.validate_only)
        except Exception as exc:
            raise KafkactlError(f"failed to delete acl: {exc}") from exc

        entries = [
            ResourceAclEntry(
                resource_type=resource_type_to_string(match.resource_type),
                resource_name=match.resource_name,
                pattern_type=pattern_type_to_string(match.resource_pattern_type),
                acls=[
                    AclEntry(
                        principal=match.principal,
                        host=match.host,
                        operation=operation_to_string(match.operation),
                        permission_type=permission_type_to_string(match.permission_type),
                    )
                ],
            )
            for match in matching
        ]
        print_resource_acls("", entries, self.stream)
        return entries


def print_resource_acls(
    output_format: str,
    acl_list: Iterable[ResourceAclEntry],
    stream: Optional[TextIO] = None,
) -> None:
    """Print ACL entries as a table ("") or as "json" / "yaml"."""
    entries = list(acl_list)
    if output_format in ("json", "yaml"):
        print_object(entries, output_format, stream)
        return
    if output_format:
        raise KafkactlError(f"unknown output format: {output_format}")

    table = TableWriter(stream)
    table.write_header(*_TABLE_HEADER)
    for entry in entries:
        for acl in entry.acls:
            table.write(
                entry.resource_type,
                entry.resource_name,
                entry.pattern_type,
                acl.principal,
                acl.host,
                acl.operation,
                acl.permission_type,
            )
    table.flush()


def from_yaml(yaml_string: str) -> list[ResourceAclEntry]:
    """Parse ACL entries printed in yaml format."""
    data = yaml.safe_load(yaml_string)
    if data is None:
        return []
    if not isinstance(data, list):
        raise KafkactlError("expected a list of acl entries")
    return [ResourceAclEntry.from_dict(item) for item in data]