"""Tests for AdfifyConfig defaults and validation."""

import pytest

from adfify.config import MEDIA_LAYOUTS, AdfifyConfig
from adfify.utils.ids import generate_local_id, sequential_ids


class TestDefaults:

    def test_defaults(self):
        config = AdfifyConfig()
        assert config.id_generator is generate_local_id
        assert config.media_layout == "center"
        assert config.max_nesting_depth is None
        assert config.metrics is None
        assert config.debug_dump_tokens is False
        assert config.debug_dump_document is False

    def test_repr_shows_generator_name(self):
        text = repr(AdfifyConfig())
        assert text.startswith("AdfifyConfig(")
        assert "id_generator=generate_local_id" in text
        assert "media_layout='center'" in text


class TestValidation:

    def test_non_callable_generator(self):
        with pytest.raises(ValueError, match="id_generator"):
            AdfifyConfig(id_generator="id-1")

    @pytest.mark.parametrize("layout", MEDIA_LAYOUTS)
    def test_valid_layouts(self, layout):
        assert AdfifyConfig(media_layout=layout).media_layout == layout

    def test_invalid_layout(self):
        with pytest.raises(ValueError, match="media_layout"):
            AdfifyConfig(media_layout="sideways")

    @pytest.mark.parametrize("depth", [0, -1])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError, match="max_nesting_depth"):
            AdfifyConfig(max_nesting_depth=depth)

    def test_valid_depth(self):
        assert AdfifyConfig(max_nesting_depth=1).max_nesting_depth == 1

    def test_custom_generator(self):
        config = AdfifyConfig(id_generator=sequential_ids("x"))
        assert config.id_generator() == "x-1"
