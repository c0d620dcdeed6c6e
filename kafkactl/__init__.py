"""Kafka administration building blocks: ACLs, brokers, schema registry helpers and output."""

__version__ = "5.0.0"