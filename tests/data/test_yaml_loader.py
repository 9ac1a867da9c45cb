"""Tests for YAML document and section index loading."""

import pytest
from pathlib import Path

from conventor.conventions.macros import Macro
from conventor.data.loader import (
    build_from_yaml,
    load_document,
    load_section_index,
    load_sections,
)
from conventor.errors import MalformedDocumentError, MissingDocumentError


class TestLoadDocument:
    """Test single-file loading."""

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "system.yaml"
        path.write_text("1C: strong\n1NT:\n  2C: Stayman\n", encoding="utf-8")

        assert load_document(path) == {"1C": "strong", "1NT": {"2C": "Stayman"}}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(MissingDocumentError) as exc_info:
            load_document(tmp_path / "absent.yaml")
        assert exc_info.value.path.endswith("absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("1C: [unclosed\n", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            load_document(path)

    def test_build_from_yaml(self, tmp_path: Path):
        path = tmp_path / "system.yaml"
        path.write_text("define:\n  HCP: points\n1C: 16+ HCP\n", encoding="utf-8")

        root = build_from_yaml(path)
        assert root.get(["1C"]).resolved_description == "16+ points"

    def test_empty_file_builds_empty_tree(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert build_from_yaml(path).children == {}


class TestSectionIndex:
    """Test section index files."""

    def test_index_entries(self, section_files: Path):
        index = load_section_index(section_files)

        assert index.global_macros == [Macro(r"\$ART", "artificial")]
        assert [entry.name for entry in index.sections] == ["Openings", "Defence"]
        assert index.sections[0].description == "First-seat openings"
        assert index.sections[1].description == ""
        assert index.sections[0].path == section_files.parent / "openings.yaml"

    def test_sections_built_with_global_macros(self, section_files: Path):
        sections = load_sections(section_files)

        openings, defence = sections
        assert openings.name == "Openings"
        assert openings.tree.get(["1C"]).resolved_description == "strong, artificial"
        assert defence.tree.get(["1H", "X"]).description == "takeout"

    def test_sections_must_be_sequence(self, tmp_path: Path):
        path = tmp_path / "index.yaml"
        path.write_text("sections:\n  name: one\n", encoding="utf-8")

        with pytest.raises(MalformedDocumentError) as exc_info:
            load_section_index(path)
        assert exc_info.value.key == "sections"

    def test_section_needs_path(self, tmp_path: Path):
        path = tmp_path / "index.yaml"
        path.write_text("sections:\n  - name: one\n", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            load_section_index(path)

    def test_missing_section_file(self, tmp_path: Path):
        path = tmp_path / "index.yaml"
        path.write_text("sections:\n  - name: one\n    path: nowhere.yaml\n", encoding="utf-8")

        with pytest.raises(MissingDocumentError):
            load_sections(path)

    def test_index_root_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "index.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            load_section_index(path)
