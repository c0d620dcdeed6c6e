import pytest

from kafkactl.output import KafkactlError
from kafkactl.validation import (
    BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG,
    Flag,
    mark_flag_at_least_one_required,
    validate_at_least_one_required_flag,
)


def _flags(*names):
    return {name: Flag(name) for name in names}


def test_mark_sets_annotation():
    flags = _flags("topic", "group")
    mark_flag_at_least_one_required(flags, "topic")
    assert flags["topic"].annotations[BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG] == ["true"]
    assert flags["group"].annotations == {}


def test_mark_unknown_flag():
    with pytest.raises(KafkactlError, match="no such flag"):
        mark_flag_at_least_one_required(_flags("topic"), "group")


def test_none_set_raises_with_names_in_order():
    flags = _flags("topic", "group", "other")
    mark_flag_at_least_one_required(flags, "topic")
    mark_flag_at_least_one_required(flags, "group")
    with pytest.raises(KafkactlError) as info:
        validate_at_least_one_required_flag(flags)
    assert str(info.value) == "At least one of the following flags must be set: group, topic"


def test_one_set_passes():
    flags = _flags("topic", "group", "other")
    mark_flag_at_least_one_required(flags, "topic")
    mark_flag_at_least_one_required(flags, "group")
    flags["group"].changed = True
    assert validate_at_least_one_required_flag(flags) == ["group", "topic"]


def test_unannotated_change_does_not_count():
    flags = _flags("topic", "other")
    mark_flag_at_least_one_required(flags, "topic")
    flags["other"].changed = True
    with pytest.raises(KafkactlError, match="topic"):
        validate_at_least_one_required_flag(flags)


def test_non_true_annotation_counts_as_set_but_not_listed():
    flags = _flags("topic", "other")
    mark_flag_at_least_one_required(flags, "topic")
    flags["other"].annotations[BASH_COMP_AT_LEAST_ONE_REQUIRED_FLAG] = ["false"]
    flags["other"].changed = True
    assert validate_at_least_one_required_flag(flags) == ["topic"]