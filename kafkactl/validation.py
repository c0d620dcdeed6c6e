"""Flags of which at least one has to be set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from kafkactl.output import KafkactlError

BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG = "cobra_annotation_bash_completion_at_least_one_required_flag"


@dataclass
class Flag:
    """A command-line flag with its annotations and whether it was set."""

    name: str
    changed: bool = False
    annotations: dict[str, list[str]] = field(default_factory=dict)


def mark_flag_at_least_one_required(flags: Mapping[str, Flag], name: str) -> None:
    """Mark the named flag as one of a group of which one must be set."""
    try:
        flag = flags[name]
    except KeyError:
        raise KafkactlError(f"no such flag -{name}") from None
    flag.annotations[BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG] = ["true"]


def validate_at_least_one_required_flag(flags: Mapping[str, Flag]) -> list[str]:
    """Raise unless an annotated flag was set; return the required flag names."""
    required: list[str] = []
    missing = True
    for flag in sorted(flags.values(), key=lambda f: f.name):
        annotation = flag.annotations.get(BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG)
        if not annotation:
            continue
        if annotation[0] == "true":
            required.append(flag.name)
        if flag.changed:
            missing = False
    if missing:
        raise KafkactlError(
            "At least one of the following flags must be set: " + ", ".join(required)
        )
    return required