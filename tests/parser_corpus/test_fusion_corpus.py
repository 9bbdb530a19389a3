"""
Fusion corpus tests.

Valid files must parse cleanly and deterministically; invalid files must
fail with exactly the diagnostic named in their ``# expect:`` header.
"""

from pathlib import Path

import pytest

from .harness import EmitMode, parse_corpus_file, read_expectation

# Corpus directories
CORPUS_DIR = Path(__file__).parent.parent / "corpora" / "fusion"


def get_valid_files() -> list[Path]:
    """Get all valid Fusion corpus files."""
    return sorted((CORPUS_DIR / "valid").glob("*.fusion"))


def get_invalid_files() -> list[Path]:
    """Get all invalid Fusion corpus files."""
    return sorted((CORPUS_DIR / "invalid").glob("*.fusion"))


class TestValidFusion:
    """Tests for valid corpus files."""

    @pytest.mark.corpus
    @pytest.mark.parametrize("fusion_file", get_valid_files(), ids=lambda p: p.stem)
    def test_valid_fusion_parses_without_errors(self, fusion_file: Path):
        """Valid files must parse without errors."""
        result = parse_corpus_file(fusion_file, EmitMode.AST)
        assert result["diagnostics"] == [], (
            f"Expected no diagnostics for valid file {fusion_file.name}, "
            f"got: {result['diagnostics']}"
        )
        assert result["result"], f"Expected statements for {fusion_file.name}"

    @pytest.mark.corpus
    @pytest.mark.parametrize("fusion_file", get_valid_files(), ids=lambda p: p.stem)
    def test_valid_fusion_parses_with_locations(self, fusion_file: Path):
        """Location tracking must not change what parses."""
        plain = parse_corpus_file(fusion_file, EmitMode.AST)
        located = parse_corpus_file(fusion_file, EmitMode.LOC)
        assert located["diagnostics"] == []
        assert len(located["result"]) == len(plain["result"])
        assert all("loc" in statement for statement in located["result"])


class TestInvalidFusion:
    """Tests for invalid corpus files."""

    @pytest.mark.corpus
    @pytest.mark.parametrize("fusion_file", get_invalid_files(), ids=lambda p: p.stem)
    def test_invalid_fusion_produces_one_error(self, fusion_file: Path):
        """Invalid files must produce exactly one error and no tree."""
        result = parse_corpus_file(fusion_file, EmitMode.DIAG)
        assert len(result["diagnostics"]) == 1
        assert result["result"] is None

    @pytest.mark.corpus
    @pytest.mark.parametrize("fusion_file", get_invalid_files(), ids=lambda p: p.stem)
    def test_invalid_fusion_matches_expectation(self, fusion_file: Path):
        """The diagnostic must name the expected error type and position."""
        expected = read_expectation(fusion_file)
        diagnostic = parse_corpus_file(fusion_file, EmitMode.DIAG)["diagnostics"][0]
        assert diagnostic["error_type"] == expected["error_type"]
        assert (diagnostic["line"], diagnostic["column"]) == (
            expected["line"],
            expected["column"],
        )


class TestFusionDeterminism:
    """Tests for parsing determinism."""

    @pytest.mark.corpus
    @pytest.mark.parametrize("fusion_file", get_valid_files(), ids=lambda p: p.stem)
    def test_parsing_is_deterministic(self, fusion_file: Path):
        """Parsing the same file twice must produce identical results."""
        result1 = parse_corpus_file(fusion_file, EmitMode.LOC)
        result2 = parse_corpus_file(fusion_file, EmitMode.LOC)
        assert result1 == result2, f"Non-deterministic parsing for {fusion_file.name}"


class TestCorpusLayout:
    """Guards against an accidentally empty corpus."""

    @pytest.mark.corpus
    def test_corpus_has_valid_and_invalid_files(self, fusion_corpus_dir: Path):
        assert list((fusion_corpus_dir / "valid").glob("*.fusion"))
        assert list((fusion_corpus_dir / "invalid").glob("*.fusion"))
