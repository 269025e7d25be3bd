"""Tests for BuildContext nesting and counters."""

import pytest

from adfify.config import AdfifyConfig
from adfify.converter.context import BuildContext
from adfify.errors import AdfifyNestingDepthError, ErrorCode


class TestNesting:

    def test_depth_restored(self, ctx):
        with ctx.nesting("list"):
            assert ctx.depth == 1
            with ctx.nesting("block_quote"):
                assert ctx.depth == 2
        assert ctx.depth == 0

    def test_depth_restored_after_error(self, ctx):
        with pytest.raises(RuntimeError):
            with ctx.nesting("list"):
                raise RuntimeError("boom")
        assert ctx.depth == 0

    def test_unlimited_by_default(self, ctx):
        for _ in range(50):
            ctx.depth += 1
        with ctx.nesting("list"):
            assert ctx.depth == 51

    def test_limit_exceeded(self):
        ctx = BuildContext(AdfifyConfig(max_nesting_depth=1))
        with ctx.nesting("list"):
            with pytest.raises(AdfifyNestingDepthError) as exc_info:
                with ctx.nesting("block_quote"):
                    pass
        err = exc_info.value
        assert err.code == ErrorCode.NESTING_DEPTH_EXCEEDED
        assert err.context == {"depth": 2, "limit": 1, "token_type": "block_quote"}
        assert ctx.depth == 0


class TestCounters:

    def test_drop(self, ctx):
        ctx.drop({"type": "html"})
        ctx.drop({})
        assert ctx.dropped == 2

    def test_new_id_uses_generator(self, ctx):
        assert [ctx.new_id(), ctx.new_id()] == ["id-1", "id-2"]

    def test_max_depth_kept_after_exit(self, ctx):
        with ctx.nesting("list"):
            with ctx.nesting("list"):
                pass
        with ctx.nesting("block_quote"):
            pass
        assert ctx.depth == 0
        assert ctx.max_depth == 2
