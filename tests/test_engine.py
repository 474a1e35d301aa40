"""
Tests for the validation engine: decoding, file loading, and result properties.
"""

import copy
import json
from typing import Optional

import pytest

from me3 import ME3_FILENAME, ME3_VERSION, load, parse, validate
from me3.models.profile import Me3Profile
from me3.validators.engine import INVALID_JSON_MESSAGE, UNREADABLE_FILE_MESSAGE
from me3.validators.models import ErrorCode, ValidationResult


class TestParse:
    """Tests for decoding me.json text."""

    def test_decode_failure(self):
        result = parse("{not json")

        assert not result.valid
        assert [(v.field, v.message) for v in result.violations] == [("root", "Invalid JSON")]
        assert result.violations[0].code == ErrorCode.DECODE_FAILURE

    @pytest.mark.parametrize("text", ["", "   ", "{'version': '0.1'}", '{"version": "0.1",}'])
    def test_other_decode_failures(self, text):
        result = parse(text)
        assert result.fields() == ["root"]
        assert result.violations[0].message == INVALID_JSON_MESSAGE

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
    def test_non_standard_constants_are_rejected(self, text):
        result = parse(text)

        assert result.fields() == ["root"]
        assert result.violations[0].code == ErrorCode.DECODE_FAILURE

    def test_nested_nan_is_rejected(self):
        text = (
            '{"version": "0.1", "name": "Jane", "intents": {"book": '
            '{"enabled": true, "url": "https://cal.com/jane", "duration": NaN}}}'
        )
        result = parse(text)

        assert [(v.field, v.message) for v in result.violations] == [("root", "Invalid JSON")]
        assert result.profile is None

    def test_deep_nesting_is_a_decode_failure(self):
        result = parse("[" * 100000 + "]" * 100000)

        assert [(v.field, v.message) for v in result.violations] == [("root", INVALID_JSON_MESSAGE)]
        assert result.violations[0].code == ErrorCode.DECODE_FAILURE

    def test_undecodable_bytes(self):
        result = parse(b"\x80\x81\x82")
        assert result.violations[0].message == INVALID_JSON_MESSAGE

    def test_valid_text(self, minimal_profile):
        result = parse(json.dumps(minimal_profile))

        assert result.valid
        assert result.profile == minimal_profile

    def test_bytes_input(self, full_profile):
        assert parse(json.dumps(full_profile).encode("utf-8")).valid

    def test_decoded_non_object(self):
        result = parse("[1, 2, 3]")
        assert [(v.field, v.message) for v in result.violations] == [("root", "Profile must be an object")]

    def test_decoded_document_is_validated(self):
        result = parse('{"version": "0.1", "name": "Jane", "intents": {"book": {"enabled": true}}}')
        assert result.fields() == ["intents.book"]


class TestLoad:
    """Tests for reading me.json from disk."""

    def test_load_valid_file(self, tmp_path, full_profile):
        path = tmp_path / ME3_FILENAME
        path.write_text(json.dumps(full_profile), encoding="utf-8")

        result = load(path)
        assert result.valid
        assert result.profile == full_profile

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / ME3_FILENAME
        path.write_text("{not json", encoding="utf-8")

        assert [(v.field, v.message) for v in load(str(path)).violations] == [("root", "Invalid JSON")]

    def test_load_missing_file(self, tmp_path):
        result = load(tmp_path / "missing.json")

        assert [(v.field, v.message) for v in result.violations] == [("root", UNREADABLE_FILE_MESSAGE)]
        assert result.violations[0].code == ErrorCode.UNREADABLE_SOURCE


class TestResultProperties:
    """Identity, idempotence and non-mutation of validation."""

    def test_typed_view_is_the_input(self, full_profile):
        result = validate(full_profile)
        assert result.profile is full_profile

    def test_input_is_not_mutated(self, full_profile):
        snapshot = copy.deepcopy(full_profile)
        validate(full_profile)
        assert full_profile == snapshot

    def test_invalid_input_is_not_mutated(self):
        doc = {"version": "9", "buttons": [{}], "footer": {"link": {}}}
        snapshot = copy.deepcopy(doc)
        validate(doc)
        assert doc == snapshot

    def test_no_view_on_failure(self):
        assert validate({"version": "0.1"}).profile is None

    @pytest.mark.parametrize("doc", [
        {"version": "0.1", "name": "Jane"},
        {"version": "0.2", "buttons": [{}, {}, {}, {}], "intents": {"book": {"pricing": {"enabled": True}}}},
        [],
    ])
    def test_idempotent(self, doc):
        first = validate(doc).model_dump_json()
        second = validate(doc).model_dump_json()
        assert first == second

    def test_typed_view_is_annotated_as_profile(self):
        assert ValidationResult.model_fields["profile"].annotation == Optional[Me3Profile]

    def test_dump_keeps_unknown_keys(self, minimal_profile):
        minimal_profile["theme"] = "dark"
        result = validate(minimal_profile)

        assert result.profile is minimal_profile
        assert result.model_dump()["profile"]["theme"] == "dark"

    def test_round_trip_through_json(self, full_profile):
        result = validate(full_profile)
        assert json.loads(json.dumps(result.profile)) == full_profile

    def test_violation_serialization(self):
        dumped = validate({"version": "0.1"}).model_dump(mode="json")

        assert dumped["valid"] is False
        assert dumped["violations"] == [
            {"field": "name", "message": "Name is required", "code": "MISSING_FIELD"},
        ]
        assert dumped["profile"] is None

    def test_protocol_constants(self):
        assert ME3_VERSION == "0.1"
        assert ME3_FILENAME == "me.json"
