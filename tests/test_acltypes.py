import pytest

from kafkactl.acltypes import (
    AclOperation,
    AclPatternType,
    AclPermissionType,
    AclResourceType,
    operation_from_string,
    operation_to_string,
    pattern_type_from_string,
    pattern_type_to_string,
    permission_type_from_string,
    permission_type_to_string,
    resource_type_from_string,
    resource_type_to_string,
)


@pytest.mark.parametrize("operation", list(AclOperation))
def test_operation_round_trip(operation):
    assert operation_from_string(operation_to_string(operation)) == operation


@pytest.mark.parametrize("pattern", list(AclPatternType))
def test_pattern_type_round_trip(pattern):
    assert pattern_type_from_string(pattern_type_to_string(pattern)) == pattern


@pytest.mark.parametrize("permission", list(AclPermissionType))
def test_permission_type_round_trip(permission):
    assert permission_type_from_string(permission_type_to_string(permission)) == permission


@pytest.mark.parametrize("resource", list(AclResourceType))
def test_resource_type_round_trip(resource):
    assert resource_type_from_string(resource_type_to_string(resource)) == resource


def test_display_names():
    assert operation_to_string(AclOperation.IDEMPOTENT_WRITE) == "IdempotentWrite"
    assert resource_type_to_string(AclResourceType.TRANSACTIONAL_ID) == "TransactionalID"
    assert pattern_type_to_string(AclPatternType.LITERAL) == "Literal"
    assert permission_type_to_string(AclPermissionType.ALLOW) == "Allow"


def test_parsing_is_case_insensitive():
    assert operation_from_string("READ") == AclOperation.READ
    assert operation_from_string("clusteraction") == AclOperation.CLUSTER_ACTION
    assert pattern_type_from_string("PREFIXED") == AclPatternType.PREFIXED


def test_unknown_strings_map_to_unknown():
    assert operation_from_string("bogus") == AclOperation.UNKNOWN
    assert permission_type_from_string("bogus") == AclPermissionType.UNKNOWN
    assert pattern_type_from_string("bogus") == AclPatternType.UNKNOWN
    assert resource_type_from_string("bogus") == AclResourceType.UNKNOWN


def test_unknown_values_map_to_empty_string():
    assert operation_to_string(99) == ""
    assert permission_type_to_string(99) == ""
    assert pattern_type_to_string(99) == ""
    assert resource_type_to_string(99) == ""