import json

import pytest

from cwmanage import PatchOperation, build_patch_body


def test_patch_body_serialization():
    body = build_patch_body(PatchOperation.REPLACE, "name", "X")
    assert json.dumps(body, separators=(",", ":")) == '[{"op":"replace","path":"name","value":"X"}]'


def test_patch_body_accepts_string_operation():
    assert build_patch_body("add", "site", {"id": 3}) == [{"op": "add", "path": "site", "value": {"id": 3}}]


def test_operation_values():
    assert [op.value for op in PatchOperation] == ["add", "replace", "remove"]
    assert str(PatchOperation.REMOVE) == "remove"


def test_unknown_operation():
    with pytest.raises(ValueError) as exc_info:
        build_patch_body("move", "name", "X")
    assert "move" in str(exc_info.value)
