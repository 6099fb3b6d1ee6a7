"""Tests for BlockRecord validation."""

from __future__ import annotations

import pytest

from blocktree.errors import BlockTreeMalformedBlockError, ErrorCode
from blocktree.models import BlockRecord


class TestBlockRecordFromRaw:
    def test_full_record(self):
        raw = {
            "blockName": "core/group",
            "attrs": {"ref": 3},
            "innerBlocks": [{"blockName": None, "innerHTML": "x"}],
            "innerHTML": "<div></div>",
        }
        record = BlockRecord.from_raw(raw)
        assert record.name == "core/group"
        assert record.inner_html == "<div></div>"
        assert record.ref == 3
        assert record.has_inner_blocks
        assert record.raw is raw

    def test_minimal_record(self):
        record = BlockRecord.from_raw({"innerHTML": ""})
        assert record.name == ""
        assert record.attrs == {}
        assert record.inner_blocks == ()
        assert record.ref is None
        assert not record.has_inner_blocks

    def test_null_attrs_and_inner_blocks(self):
        record = BlockRecord.from_raw({"blockName": None, "innerHTML": "", "attrs": None, "innerBlocks": None})
        assert record.attrs == {}
        assert record.inner_blocks == ()

    @pytest.mark.parametrize("ref", [0, "", None])
    def test_empty_ref_is_none(self, ref):
        assert BlockRecord.from_raw({"innerHTML": "", "attrs": {"ref": ref}}).ref is None

    def test_frozen(self):
        record = BlockRecord.from_raw({"innerHTML": ""})
        with pytest.raises(AttributeError):
            record.name = "x"


class TestMalformedRecords:
    @pytest.mark.parametrize(("raw", "field"), [
        ("not a block", "block"),
        (None, "block"),
        ({"blockName": 3, "innerHTML": ""}, "blockName"),
        ({"blockName": "x"}, "innerHTML"),
        ({"innerHTML": None}, "innerHTML"),
        ({"innerHTML": "", "attrs": ["a"]}, "attrs"),
        ({"innerHTML": "", "innerBlocks": "abc"}, "innerBlocks"),
        ({"innerHTML": "", "innerBlocks": 5}, "innerBlocks"),
    ])
    def test_rejected(self, raw, field):
        with pytest.raises(BlockTreeMalformedBlockError) as exc_info:
            BlockRecord.from_raw(raw)
        assert exc_info.value.code == ErrorCode.MALFORMED_BLOCK
        assert exc_info.value.context["field"] == field
