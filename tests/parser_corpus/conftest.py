"""Pytest configuration for parser corpus tests."""

from pathlib import Path

import pytest

# Corpus directories
CORPORA_DIR = Path(__file__).parent.parent / "corpora"
FUSION_CORPUS_DIR = CORPORA_DIR / "fusion"


@pytest.fixture
def fusion_corpus_dir() -> Path:
    """Return path to the Fusion corpus directory."""
    return FUSION_CORPUS_DIR
