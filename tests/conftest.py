"""Shared test fixtures for the adfify test suite."""

from __future__ import annotations

import pytest

from adfify.config import AdfifyConfig
from adfify.converter.context import BuildContext
from adfify.converter.md_to_adf import MarkdownToAdfConverter
from adfify.converter.tokenizer import MarkdownTokenizer
from adfify.utils.ids import sequential_ids


@pytest.fixture
def config() -> AdfifyConfig:
    """Default test configuration with deterministic local ids."""
    return AdfifyConfig(id_generator=sequential_ids("id"))


@pytest.fixture
def converter(config: AdfifyConfig) -> MarkdownToAdfConverter:
    """Markdown-to-ADF converter using the default test config."""
    return MarkdownToAdfConverter(config)


@pytest.fixture
def ctx(config: AdfifyConfig) -> BuildContext:
    """Fresh build context for calling the builders directly."""
    return BuildContext(config)


@pytest.fixture
def tokenizer() -> MarkdownTokenizer:
    return MarkdownTokenizer()
