"""Shared pytest fixtures for fusion-parser tests."""

from pathlib import Path

import pytest

VALID_CORPUS_DIR = Path(__file__).parent / "corpora" / "fusion" / "valid"


@pytest.fixture
def neos_root_source() -> str:
    """Return the Neos default root rendering configuration."""
    return (VALID_CORPUS_DIR / "neos_root.fusion").read_text(encoding="utf-8")


@pytest.fixture
def nested_prototypes_source() -> str:
    """Return a document with prototypes nested three levels deep."""
    return (VALID_CORPUS_DIR / "nested_prototypes.fusion").read_text(encoding="utf-8")
