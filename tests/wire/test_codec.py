"""Tests for encode / decode, the result channel, and decode errors."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from playfab_models.wire import (
    DecodeError,
    DecodeResult,
    MissingRequiredField,
    String,
    TypeMismatch,
    WireModel,
    decode,
    encode,
    from_json,
    to_json,
    try_decode,
)
from playfab_models.wire.errors import format_path, wire_type_name


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class Player(WireModel):
    id: String
    nick: String | None = None


class Roster(WireModel):
    title: String
    players: list[Player] | None = None
    captain: Player | None = None
    notes: dict[str, String] | None = None


class Crew(WireModel):
    lead: Player
    players: list[Player]


def _roster_wire() -> dict:
    return {
        "Title": "Night shift",
        "Players": [{"Id": "p1", "Nick": "ace"}, {"Id": "p2"}],
        "Captain": {"Id": "p1"},
        "Notes": {"p2": "new"},
    }


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------

class TestRoundTrip:
    def test_decode_then_encode_is_identity(self):
        wire = _roster_wire()
        assert encode(decode(Roster, wire)) == wire

    def test_encode_then_decode_is_identity(self):
        roster = Roster(
            title="t",
            players=[Player(id="a"), Player(id="b", nick="bee")],
            notes={},
        )
        assert decode(Roster, encode(roster)) == roster

    def test_serialization_is_byte_stable(self):
        first = to_json(decode(Roster, _roster_wire()))
        second = to_json(from_json(Roster, first))
        assert first == second

    def test_to_json_is_compact(self):
        assert to_json(Player(id="p")) == '{"Id":"p"}'

    def test_from_json(self):
        assert from_json(Player, '{"Id": "p", "Nick": "n"}') == Player(id="p", nick="n")

    def test_from_json_invalid_text(self):
        with pytest.raises(ValueError):
            from_json(Player, "{not json")

    def test_empty_collections_are_not_absent(self):
        assert encode(Roster(title="t", players=[], notes={})) == {
            "Title": "t",
            "Players": [],
            "Notes": {},
        }

    def test_unknown_keys_dropped(self):
        roster = decode(Roster, {"Title": "t", "Sponsor": "acme"})
        assert encode(roster) == {"Title": "t"}

    def test_wire_names_are_case_sensitive(self):
        with pytest.raises(MissingRequiredField):
            decode(Player, {"ID": "p"})

    def test_python_names_are_not_wire_names(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(Player, {"id": "p"})
        assert exc_info.value.path == "Player.Id"

    def test_python_names_accepted_on_construction(self):
        assert Roster(title="t").title == "t"

    def test_models_are_frozen(self):
        roster = Roster(title="t")
        with pytest.raises(ValidationError):
            roster.title = "u"

    def test_to_wire_and_from_wire(self):
        wire = _roster_wire()
        assert Roster.from_wire(wire).to_wire() == wire


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------

class TestDecodeErrors:
    def test_missing_required(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(Roster, {})
        err = exc_info.value
        assert err.path == "Roster.Title"
        assert err.expected == "string"
        assert err.actual == "absent"

    def test_nested_path_with_index(self):
        wire = _roster_wire()
        wire["Players"][1] = {"Id": 2}
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Roster, wire)
        err = exc_info.value
        assert err.path == "Roster.Players[1].Id"
        assert err.expected == "string"
        assert err.actual == "number"

    def test_nested_missing(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(Roster, {"Title": "t", "Captain": {"Nick": "x"}})
        assert exc_info.value.path == "Roster.Captain.Id"
        assert exc_info.value.expected == "string"

    def test_missing_nested_model_names_its_type(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(Crew, {})
        assert [(i.path, i.expected) for i in exc_info.value.issues] == [
            ("Crew.Lead", "Player"),
            ("Crew.Players", "array"),
        ]

    def test_array_expected(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Roster, {"Title": "t", "Players": {"Id": "p"}})
        assert exc_info.value.expected == "array"
        assert exc_info.value.actual == "object"

    def test_map_value_path(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Roster, {"Title": "t", "Notes": {"p1": False}})
        assert exc_info.value.path == "Roster.Notes.p1"
        assert exc_info.value.actual == "boolean"

    def test_null_for_required_field(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Roster, {"Title": None})
        assert exc_info.value.actual == "null"

    def test_root_not_an_object(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(Roster, ["Title"])
        err = exc_info.value
        assert err.path == "Roster"
        assert err.expected == "Roster"
        assert err.actual == "array"

    def test_all_issues_reported(self):
        with pytest.raises(DecodeError) as exc_info:
            decode(Roster, {"Players": [{"Id": 1}], "Captain": "p1"})
        err = exc_info.value
        assert isinstance(err, MissingRequiredField)
        assert [issue.path for issue in err.issues] == [
            "Roster.Title",
            "Roster.Players[0].Id",
            "Roster.Captain",
        ]
        assert err.issues[0] is err

    def test_errors_are_value_errors(self):
        assert issubclass(DecodeError, ValueError)

    def test_message_names_path(self):
        with pytest.raises(DecodeError, match=r"Roster\.Title"):
            decode(Roster, {})


# ---------------------------------------------------------------------------
# try_decode
# ---------------------------------------------------------------------------

class TestTryDecode:
    def test_ok(self):
        result = try_decode(Player, {"Id": "p"})
        assert isinstance(result, DecodeResult)
        assert result.ok
        assert result.error is None
        assert result.unwrap() == Player(id="p")

    def test_error(self):
        result = try_decode(Player, {"Nick": "n"})
        assert not result.ok
        assert result.value is None
        assert isinstance(result.error, MissingRequiredField)
        with pytest.raises(MissingRequiredField):
            result.unwrap()

    def test_strict_flag_passed_through(self):
        assert try_decode(Player, {"Id": "p"}, strict_variants=True).ok


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------

class TestErrorHelpers:
    @pytest.mark.parametrize(
        ("value", "name"),
        [
            (None, "null"),
            (True, "boolean"),
            (3, "number"),
            (2.5, "number"),
            ("s", "string"),
            ([], "array"),
            ({}, "object"),
        ],
    )
    def test_wire_type_name(self, value, name):
        assert wire_type_name(value) == name

    def test_format_path(self):
        assert format_path("Group", ("Members", 2, "Key", "Id")) == "Group.Members[2].Key.Id"
        assert format_path("Group", ()) == "Group"

    def test_json_helper_matches_encode(self):
        roster = decode(Roster, _roster_wire())
        assert json.loads(to_json(roster)) == encode(roster)
