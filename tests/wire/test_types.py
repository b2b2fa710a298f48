"""Tests for the semantic field types -- scalars, timestamps, unordered
lists and clearable fields."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated

import pytest

from playfab_models.wire import (
    Boolean,
    Clearable,
    Double,
    FieldState,
    Integer,
    String,
    Timestamp,
    TypeMismatch,
    Unordered,
    UnorderedList,
    WireModel,
    decode,
    format_timestamp,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class Scalars(WireModel):
    name: String | None = None
    count: Integer | None = None
    ratio: Double | None = None
    enabled: Boolean | None = None


class Stamped(WireModel):
    at: Timestamp | None = None


class Member(WireModel):
    id: String
    rank: Integer | None = None


class Squad(WireModel):
    tags: Annotated[list[String], Unordered()] | None = None
    members: Annotated[list[Member], Unordered(key="id")] | None = None
    order: list[String] | None = None


class Note(WireModel):
    key: String
    value: Clearable[String] = None
    comment: String | None = None


UTC = timezone.utc


# ---------------------------------------------------------------------------
# Strict scalars
# ---------------------------------------------------------------------------

class TestScalars:
    def test_values_decode(self):
        s = decode(Scalars, {"Name": "a", "Count": 3, "Ratio": 0.5, "Enabled": True})
        assert s.name == "a"
        assert s.count == 3
        assert s.ratio == 0.5
        assert s.enabled is True

    def test_integer_accepted_for_double(self):
        s = decode(Scalars, {"Ratio": 2})
        assert s.ratio == 2.0

    @pytest.mark.parametrize(
        ("wire", "path", "expected", "actual"),
        [
            ({"Count": "3"}, "Scalars.Count", "integer", "string"),
            ({"Name": 7}, "Scalars.Name", "string", "number"),
            ({"Enabled": 1}, "Scalars.Enabled", "boolean", "number"),
            ({"Enabled": "true"}, "Scalars.Enabled", "boolean", "string"),
            ({"Ratio": "0.5"}, "Scalars.Ratio", "number", "string"),
        ],
    )
    def test_no_coercion(self, wire, path, expected, actual):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Scalars, wire)
        err = exc_info.value
        assert err.path == path
        assert err.expected == expected
        assert err.actual == actual

    def test_absent_is_not_zero(self):
        s = decode(Scalars, {})
        assert s.count is None
        assert s.to_wire() == {}
        assert Scalars(count=0).to_wire() == {"Count": 0}

    def test_empty_string_is_kept(self):
        assert decode(Scalars, {"Name": ""}).to_wire() == {"Name": ""}


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

class TestTimestamp:
    def test_decode_utc(self):
        s = decode(Stamped, {"At": "2024-03-01T12:30:45.123Z"})
        assert s.at == datetime(2024, 3, 1, 12, 30, 45, 123000, tzinfo=UTC)

    def test_encode_fixed_format(self):
        s = Stamped(at=datetime(2024, 3, 1, 12, 30, 45, 123000, tzinfo=UTC))
        assert s.to_wire() == {"At": "2024-03-01T12:30:45.123Z"}

    def test_whole_seconds_get_millis(self):
        s = decode(Stamped, {"At": "2024-03-01T12:30:45Z"})
        assert s.to_wire() == {"At": "2024-03-01T12:30:45.000Z"}

    def test_offset_normalized_to_utc(self):
        s = decode(Stamped, {"At": "2024-03-01T14:30:45.000+02:00"})
        assert s.to_wire() == {"At": "2024-03-01T12:30:45.000Z"}
        assert s.at.utcoffset() == timedelta(0)

    def test_sub_millisecond_truncated(self):
        s = Stamped(at=datetime(2024, 3, 1, 0, 0, 0, 999999, tzinfo=UTC))
        assert s.at.microsecond == 999000
        assert s.to_wire() == {"At": "2024-03-01T00:00:00.999Z"}

    def test_naive_is_utc(self):
        naive = Stamped(at=datetime(2024, 3, 1, 8, 0, 0))
        aware = Stamped(at=datetime(2024, 3, 1, 8, 0, 0, tzinfo=UTC))
        assert naive == aware

    def test_normalization_idempotent(self):
        first = decode(Stamped, {"At": "2024-03-01T14:30:45.123456+02:00"}).to_wire()
        second = decode(Stamped, first).to_wire()
        assert first == second == {"At": "2024-03-01T12:30:45.123Z"}

    def test_number_rejected(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Stamped, {"At": 1709296245})
        assert exc_info.value.path == "Stamped.At"
        assert exc_info.value.expected == "timestamp"
        assert exc_info.value.actual == "number"

    def test_garbage_string_rejected(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Stamped, {"At": "yesterday"})
        assert exc_info.value.expected == "timestamp"

    def test_format_timestamp(self):
        assert (
            format_timestamp(datetime(1999, 12, 31, 23, 59, 59, tzinfo=UTC))
            == "1999-12-31T23:59:59.000Z"
        )


# ---------------------------------------------------------------------------
# Unordered collections
# ---------------------------------------------------------------------------

class TestUnorderedList:
    def test_permutation_equal(self):
        assert UnorderedList([1, 2, 3]) == [3, 1, 2]
        assert [3, 1, 2] == UnorderedList([1, 2, 3])

    def test_multiplicity_matters(self):
        assert UnorderedList([1, 2, 2]) != [1, 1, 2]
        assert UnorderedList([1, 2]) != [1, 2, 2]

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(UnorderedList([1]))

    def test_model_holding_a_list_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Squad(tags=["x"]))

    def test_scalar_model_hashable(self):
        assert hash(Member(id="a", rank=1)) == hash(Member(id="a", rank=1))

    def test_field_is_wrapped(self):
        squad = Squad(tags=["x", "y"])
        assert isinstance(squad.tags, UnorderedList)

    def test_models_equal_under_permutation(self):
        a = decode(Squad, {"Tags": ["x", "y", "z"]})
        b = decode(Squad, {"Tags": ["z", "x", "y"]})
        assert a == b

    def test_keyed_members_equal_under_permutation(self):
        a = decode(Squad, {"Members": [{"Id": "1", "Rank": 1}, {"Id": "2", "Rank": 2}]})
        b = decode(Squad, {"Members": [{"Id": "2", "Rank": 2}, {"Id": "1", "Rank": 1}]})
        assert a == b

    def test_keyed_members_compare_whole_element(self):
        a = decode(Squad, {"Members": [{"Id": "1", "Rank": 1}]})
        b = decode(Squad, {"Members": [{"Id": "1", "Rank": 9}]})
        assert a != b

    def test_ordered_list_is_order_sensitive(self):
        a = decode(Squad, {"Order": ["x", "y"]})
        b = decode(Squad, {"Order": ["y", "x"]})
        assert a != b

    def test_encode_keeps_insertion_order(self):
        assert Squad(tags=["b", "a"]).to_wire() == {"Tags": ["b", "a"]}


# ---------------------------------------------------------------------------
# Clearable (three-state) fields
# ---------------------------------------------------------------------------

class TestClearable:
    def test_absent_omitted(self):
        assert Note(key="k").to_wire() == {"Key": "k"}

    def test_explicit_null_emitted(self):
        assert Note(key="k", value=None).to_wire() == {"Key": "k", "Value": None}

    def test_value_emitted(self):
        assert Note(key="k", value="v").to_wire() == {"Key": "k", "Value": "v"}

    def test_plain_optional_null_omitted(self):
        assert Note(key="k", comment=None).to_wire() == {"Key": "k"}

    def test_field_states(self):
        assert decode(Note, {"Key": "k"}).field_state("value") is FieldState.ABSENT
        assert decode(Note, {"Key": "k", "Value": None}).field_state("value") is FieldState.NULL
        assert decode(Note, {"Key": "k", "Value": "v"}).field_state("value") is FieldState.VALUE

    def test_absent_and_null_differ(self):
        assert Note(key="k") != Note(key="k", value=None)
        assert Note(key="k", value=None) == decode(Note, {"Key": "k", "Value": None})

    def test_null_survives_round_trip(self):
        wire = {"Key": "k", "Value": None}
        assert decode(Note, wire).to_wire() == wire

    def test_clearable_fields(self):
        assert Note.clearable_fields() == frozenset({"value"})
        assert Scalars.clearable_fields() == frozenset()

    def test_field_state_unknown_field(self):
        with pytest.raises(AttributeError):
            Note(key="k").field_state("missing")
