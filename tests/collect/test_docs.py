"""Tests for docstring payload evaluation."""

from __future__ import annotations

from pathlib import Path

from docsweep.collect._internal.docs import find_external


class TestFindExternal:
    def test_given_existing_file_when_named_then_content_returned(self, tmp_path: Path) -> None:
        # Given
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "area.md").write_text("Area of a shape.\n")
        source = str(tmp_path / "geometry.jl")

        # When
        result = find_external("docs/area.md", source, [".md"])

        # Then
        assert result == "Area of a shape.\n"

    def test_missing_file_keeps_payload(self, tmp_path: Path) -> None:
        source = str(tmp_path / "geometry.jl")
        assert find_external("area.md", source, [".md"]) == "area.md"

    def test_other_suffix_keeps_payload(self, tmp_path: Path) -> None:
        (tmp_path / "area.txt").write_text("text")
        source = str(tmp_path / "geometry.jl")

        assert find_external("area.txt", source, [".md"]) == "area.txt"

    def test_multiline_docstring_untouched(self, tmp_path: Path) -> None:
        payload = "Computes the area.\nSee area.md"
        assert find_external(payload, str(tmp_path / "g.jl"), [".md"]) == payload

    def test_non_string_payload_untouched(self, tmp_path: Path) -> None:
        payload = {"text": "area.md"}
        assert find_external(payload, str(tmp_path / "g.jl"), [".md"]) is payload

    def test_given_overlong_name_when_evaluated_then_payload_kept(self, tmp_path: Path) -> None:
        # Given
        payload = "See the discussion " + "x" * 300 + " in notes.md"

        # When
        result = find_external(payload, str(tmp_path / "g.jl"), [".md"])

        # Then
        assert result == payload

    def test_nul_byte_keeps_payload(self, tmp_path: Path) -> None:
        payload = "bad\x00name.md"
        assert find_external(payload, str(tmp_path / "g.jl"), [".md"]) == payload

    def test_given_non_utf8_file_when_evaluated_then_payload_kept(self, tmp_path: Path) -> None:
        # Given
        (tmp_path / "latin.md").write_bytes(b"caf\xe9 \xff\xfe")

        # When
        result = find_external("latin.md", str(tmp_path / "g.jl"), [".md"])

        # Then
        assert result == "latin.md"
