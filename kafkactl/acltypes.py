"""ACL enumerations, records and their string conversions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping, Optional, TypeVar

_log = logging.getLogger(__name__)


class AclOperation(IntEnum):
    UNKNOWN = 0
    ANY = 1
    ALL = 2
    READ = 3
    WRITE = 4
    CREATE = 5
    DELETE = 6
    ALTER = 7
    DESCRIBE = 8
    CLUSTER_ACTION = 9
    DESCRIBE_CONFIGS = 10
    ALTER_CONFIGS = 11
    IDEMPOTENT_WRITE = 12


class AclPermissionType(IntEnum):
    UNKNOWN = 0
    ANY = 1
    DENY = 2
    ALLOW = 3


class AclPatternType(IntEnum):
    UNKNOWN = 0
    ANY = 1
    MATCH = 2
    LITERAL = 3
    PREFIXED = 4


class AclResourceType(IntEnum):
    UNKNOWN = 0
    ANY = 1
    TOPIC = 2
    GROUP = 3
    CLUSTER = 4
    TRANSACTIONAL_ID = 5


@dataclass
class Acl:
    """A single access rule for a resource."""

    principal: str
    host: str
    operation: AclOperation
    permission_type: AclPermissionType


@dataclass
class Resource:
    """The resource an ACL applies to."""

    resource_type: AclResourceType
    resource_name: str
    resource_pattern_type: AclPatternType


@dataclass
class AclFilter:
    """Criteria for listing or deleting ACLs; None means "any"."""

    resource_type: AclResourceType = AclResourceType.ANY
    resource_name: Optional[str] = None
    resource_pattern_type: AclPatternType = AclPatternType.ANY
    principal: Optional[str] = None
    host: Optional[str] = None
    operation: AclOperation = AclOperation.ANY
    permission_type: AclPermissionType = AclPermissionType.ANY


@dataclass
class ResourceAcls:
    """A resource together with all ACLs bound to it."""

    resource: Resource
    acls: list[Acl] = field(default_factory=list)


@dataclass
class MatchingAcl:
    """An ACL that matched a delete filter."""

    resource_type: AclResourceType
    resource_name: str
    resource_pattern_type: AclPatternType
    principal: str
    host: str
    operation: AclOperation
    permission_type: AclPermissionType


_OPERATION_NAMES = {
    AclOperation.UNKNOWN: "Unknown",
    AclOperation.ANY: "Any",
    AclOperation.ALL: "All",
    AclOperation.READ: "Read",
    AclOperation.WRITE: "Write",
    AclOperation.CREATE: "Create",
    AclOperation.DELETE: "Delete",
    AclOperation.ALTER: "Alter",
    AclOperation.DESCRIBE: "Describe",
    AclOperation.CLUSTER_ACTION: "ClusterAction",
    AclOperation.DESCRIBE_CONFIGS: "DescribeConfigs",
    AclOperation.ALTER_CONFIGS: "AlterConfigs",
    AclOperation.IDEMPOTENT_WRITE: "IdempotentWrite",
}

_PERMISSION_NAMES = {
    AclPermissionType.UNKNOWN: "Unknown",
    AclPermissionType.ANY: "Any",
    AclPermissionType.DENY: "Deny",
    AclPermissionType.ALLOW: "Allow",
}

_PATTERN_NAMES = {
    AclPatternType.UNKNOWN: "Unknown",
    AclPatternType.ANY: "Any",
    AclPatternType.MATCH: "Match",
    AclPatternType.LITERAL: "Literal",
    AclPatternType.PREFIXED: "Prefixed",
}

_RESOURCE_NAMES = {
    AclResourceType.UNKNOWN: "Unknown",
    AclResourceType.ANY: "Any",
    AclResourceType.TOPIC: "Topic",
    AclResourceType.GROUP: "Group",
    AclResourceType.CLUSTER: "Cluster",
    AclResourceType.TRANSACTIONAL_ID: "TransactionalID",
}

_E = TypeVar("_E", bound=IntEnum)


def _reverse(names: Mapping[_E, str]) -> dict[str, _E]:
    return {name.lower(): member for member, name in names.items()}


_OPERATION_LOOKUP = _reverse(_OPERATION_NAMES)
_PERMISSION_LOOKUP = _reverse(_PERMISSION_NAMES)
_PATTERN_LOOKUP = _reverse(_PATTERN_NAMES)
_RESOURCE_LOOKUP = _reverse(_RESOURCE_NAMES)


def _to_string(enum_cls: type[_E], names: Mapping[_E, str], value: object, kind: str) -> str:
    try:
        member = enum_cls(value)
    except ValueError:
        _log.warning("unknown %s: %s", kind, value)
        return ""
    return names[member]


def _from_string(lookup: Mapping[str, _E], text: str, unknown: _E, kind: str) -> _E:
    try:
        return lookup[text.lower()]
    except KeyError:
        _log.warning("unknown %s: %s", kind, text)
        return unknown


def operation_to_string(operation) -> str:
    """Display name of an operation, or "" when it is not known."""
    return _to_string(AclOperation, _OPERATION_NAMES, operation, "operation")


def operation_from_string(text: str) -> AclOperation:
    """Parse an operation name, case-insensitively."""
    return _from_string(_OPERATION_LOOKUP, text, AclOperation.UNKNOWN, "operation")


def permission_type_to_string(permission_type) -> str:
    """Display name of a permission type, or "" when it is not known."""
    return _to_string(AclPermissionType, _PERMISSION_NAMES, permission_type, "permissionType")


def permission_type_from_string(text: str) -> AclPermissionType:
    """Parse a permission type name, case-insensitively."""
    return _from_string(_PERMISSION_LOOKUP, text, AclPermissionType.UNKNOWN, "permissionType")


def pattern_type_to_string(pattern_type) -> str:
    """Display name of a pattern type, or "" when it is not known."""
    return _to_string(AclPatternType, _PATTERN_NAMES, pattern_type, "pattern type")


def pattern_type_from_string(text: str) -> AclPatternType:
    """Parse a pattern type name, case-insensitively."""
    return _from_string(_PATTERN_LOOKUP, text, AclPatternType.UNKNOWN, "pattern type")


def resource_type_to_string(resource_type) -> str:
    """Display name of a resource type, or "" when it is not known."""
    return _to_string(AclResourceType, _RESOURCE_NAMES, resource_type, "resource type")


def resource_type_from_string(text: str) -> AclResourceType:
    """Parse a resource type name, case-insensitively."""
    return _from_string(_RESOURCE_LOOKUP, text, AclResourceType.UNKNOWN, "resource type")