"""
Unit tests for the Command and CodeAction models.
"""

import pytest
from lsprotocol.types import CodeActionKind
from pydantic import ValidationError

from lsp_wire.core.errors import DecodeError
from lsp_wire.core.types import CodeAction, Command, dump_json, load_json


class TestCommand:

    def test_to_wire_has_no_extra_fields(self):
        assert Command(title="t", command="c").to_wire() == {"title": "t", "command": "c"}

    def test_command_must_be_string(self):
        with pytest.raises(ValidationError):
            Command(title="t", command={"title": "t", "command": "c"})

    def test_unknown_fields_are_dropped(self):
        cmd = Command.model_validate({"title": "t", "command": "c", "tooltip": "x"})
        assert cmd.to_wire() == {"title": "t", "command": "c"}


class TestCodeAction:

    def test_canonical_key_order(self):
        action = CodeAction.model_validate({
            "command": {"command": "c", "title": "t"},
            "edit": {"changes": {}},
            "isPreferred": False,
            "diagnostics": [],
            "kind": "quickfix",
            "title": "fix",
        })
        assert list(action.to_wire()) == [
            "title", "kind", "diagnostics", "isPreferred", "edit", "command",
        ]
        assert list(action.to_wire()["command"]) == ["title", "command"]

    def test_accepts_alias_and_field_name(self):
        by_alias = CodeAction.model_validate({"title": "t", "isPreferred": True})
        by_name = CodeAction(title="t", is_preferred=True)
        assert by_alias == by_name

    def test_kind_enum_is_stored_as_string(self):
        action = CodeAction(title="t", kind=CodeActionKind.SourceOrganizeImports)
        assert action.kind == "source.organizeImports"
        assert type(action.kind) is str

    def test_explicit_null_is_preserved(self):
        action = CodeAction.model_validate({"title": "t", "data": None})
        assert dump_json(action.to_wire()) == '{"title":"t","data":null}'

    def test_disabled_and_data(self):
        raw = '{"title":"t","disabled":{"reason":"no selection"},"data":{"id":7}}'
        assert dump_json(CodeAction.model_validate(load_json(raw)).to_wire()) == raw


class TestJSONHelpers:

    def test_dump_is_compact(self):
        assert dump_json({"a": [1, 2], "b": "é"}) == '{"a":[1,2],"b":"é"}'

    @pytest.mark.parametrize("raw", ["{", b"\xff\xfe{", "[1,]"])
    def test_load_malformed_raises(self, raw):
        with pytest.raises(DecodeError):
            load_json(raw)
