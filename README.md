# kafkactl

A library of building blocks for administering Apache Kafka clusters.

- `kafkactl.acltypes`: enumerations for ACL operations, permission types,
  pattern types and resource types, the records `Acl`, `Resource`,
  `AclFilter`, `ResourceAcls` and `MatchingAcl`, and conversions of the
  enumerations to and from their display names.
- `kafkactl.acl`: `AclOperations` lists, creates and deletes ACLs through an
  admin object you supply, and prints the result.
- `kafkactl.broker`: `BrokerOperations` lists brokers, describes one broker
  with its non-default configuration, alters broker configuration and lists
  broker ids.
- `kafkactl.schemaregistry`: `CachingSchemaRegistry` wraps a schema registry
  client, remembers its subject list, checks whether a subject of a given
  `SchemaType` exists, and unpacks the registry wire format (a zero magic byte
  followed by a 4-byte big-endian schema id).
- `kafkactl.output`: `TableWriter` for whitespace-aligned tables,
  `print_object` for JSON and YAML, and `KafkactlError`.
- `kafkactl.validation`: `Flag`, `mark_flag_at_least_one_required` and
  `validate_at_least_one_required_flag` for "at least one of these flags must
  be set" checks.
- `kafkactl.version`: `VersionInfo` and `current_version_info`.

## What you supply

The package does not connect to Kafka or to a schema registry. Operations
take objects you provide:

- for `AclOperations`, an admin with `list_acls(acl_filter)`,
  `create_acl(resource, acl)` and `delete_acl(acl_filter, validate_only)`;
- for `BrokerOperations`, a client whose `brokers()` yields objects with `id`
  and `address`, and an admin with `describe_broker_config(broker_id)`
  (yielding entries with `name`, `value` and `default`) and
  `alter_broker_config(broker_id, entries, validate_only)`;
- for `CachingSchemaRegistry`, a client with `get_subjects()` and
  `get_latest_schema(subject)`, the latter returning an object whose
  `schema_type` is a `SchemaType` or `None` (`None` counts as Avro).

Errors raised by these objects are re-raised as `KafkactlError` or
`SchemaRegistryError` with a message saying what failed.

## ACL names

```python
from kafkactl.acltypes import operation_from_string, operation_to_string

op = operation_from_string("read")      # case-insensitive: AclOperation.READ
print(operation_to_string(op))          # "Read"
```

Unknown names parse to the `UNKNOWN` member of each enumeration, and unknown
values convert to `""`; both log a warning instead of raising.

## Listing ACLs

```python
import sys
from kafkactl.acl import AclOperations, GetAclFlags

operations = AclOperations(admin, sys.stdout)
entries = operations.get_acl(GetAclFlags(topics=True, operation="read"))
```

Output is a table unless `output_format` is `"json"` or `"yaml"`; any other
value raises `KafkactlError`. YAML output can be read back with
`kafkactl.acl.from_yaml`. `create_acl` creates one ACL per host and operation
(host defaults to `*`) unless `validate_only` is set; `delete_acl` requires an
operation, a pattern type and exactly one of topics, groups or cluster.
Setting both allow and deny raises `KafkactlError`.

## Brokers

```python
import sys
from kafkactl.broker import BrokerOperations, GetBrokersFlags

brokers = BrokerOperations(client, admin, sys.stdout)
brokers.get_brokers(GetBrokersFlags())          # table of ID and ADDRESS
brokers.get_brokers(GetBrokersFlags("compact")) # addresses only
print(brokers.list_broker_ids())
```

`describe_broker` prints the broker's id and address, then its non-default
configuration; with `"json"` or `"yaml"` it prints the `Broker` instead, and
`kafkactl.broker.from_yaml` parses that YAML back. `alter_broker` takes
configs as `key=value` strings; an empty value drops the key from the request.

## Schema registry wire format

```python
from kafkactl.schemaregistry import CachingSchemaRegistry

registry = CachingSchemaRegistry(client)
data = b"\x00\x00\x00\x00\x2a" + b"payload"
registry.extract_schema_id(data)   # 42
registry.extract_payload(data)     # b"payload"
```

Data shorter than five bytes, a non-zero magic byte or a schema id of zero
raise `SchemaRegistryError`.

## What is not included

There is no command-line program and no Kafka or schema registry client.
Topics, consumer groups, producing and consuming messages, and configuration
contexts are not handled.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.