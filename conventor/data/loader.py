"""
YAML loading for convention documents and section indexes.

A section index is a YAML file with global macros and a list of sections,
each pointing at its own convention document:

    define:
      HCP: high card points
    sections:
      - name: Openings
        description: First-seat openings
        path: openings.yaml

Section paths are resolved relative to the index file.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import yaml

from conventor.conventions.macros import Macro
from conventor.conventions.tree import ConventionNode
from conventor.errors import MalformedDocumentError, MissingDocumentError

from .document import build_from_generic_document, macros_from_mapping

SECTIONS_KEY = "sections"


@dataclass(frozen=True)
class SectionEntry:
    """One entry of a section index."""
    name: str
    description: str
    path: Path


@dataclass(frozen=True)
class SectionIndex:
    """Parsed section index: global macros plus section entries."""
    global_macros: list[Macro] = field(default_factory=list)
    sections: list[SectionEntry] = field(default_factory=list)


@dataclass
class Section:
    """A named convention tree built from one section of an index."""
    name: str
    description: str
    tree: ConventionNode


def load_document(path: Union[str, Path]) -> Any:
    """
    Load a YAML document from disk.

    Raises:
        MissingDocumentError: If the file does not exist
        MalformedDocumentError: If the file is not valid YAML
    """
    path = Path(path)
    if not path.is_file():
        raise MissingDocumentError(f"Convention file not found: {path}", path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(
            f"Invalid YAML in {path}: {e}",
            path=str(path),
            expected_shape="YAML document",
        ) from e


def _text_field(entry: Mapping, key: str) -> str:
    value = entry.get(key)
    return "" if value is None else str(value)


def load_section_index(path: Union[str, Path]) -> SectionIndex:
    """
    Load a section index file.

    Raises:
        MissingDocumentError: If the index file does not exist
        MalformedDocumentError: If the index has the wrong shape
    """
    path = Path(path)
    document = load_document(path)

    if document is None:
        return SectionIndex()

    if not isinstance(document, Mapping):
        raise MalformedDocumentError(
            "Section index root must be a mapping",
            path=str(path),
            expected_shape="mapping",
        )

    global_macros = macros_from_mapping(document.get("define"), f"{path}/define")

    raw_sections = document.get(SECTIONS_KEY) or []
    if not isinstance(raw_sections, list):
        raise MalformedDocumentError(
            "Sections must be a sequence",
            path=str(path),
            key=SECTIONS_KEY,
            expected_shape="sequence",
        )

    sections = []
    for index, entry in enumerate(raw_sections):
        if not isinstance(entry, Mapping) or not entry.get("path"):
            raise MalformedDocumentError(
                "Each section must be a mapping with a path",
                path=f"{path}/{SECTIONS_KEY}[{index}]",
                expected_shape="mapping with name, description and path",
            )

        sections.append(SectionEntry(
            name=_text_field(entry, "name"),
            description=_text_field(entry, "description"),
            path=path.parent / str(entry["path"]),
        ))

    return SectionIndex(global_macros=global_macros, sections=sections)


def build_from_yaml(
    path: Union[str, Path], global_macros: Optional[Iterable[Macro]] = None
) -> ConventionNode:
    """Load a YAML convention file and build its unexpanded tree."""
    document = load_document(path)
    if document is None:
        document = {}
    return build_from_generic_document(document, global_macros)


def load_sections(path: Union[str, Path]) -> list[Section]:
    """
    Build the unexpanded tree of every section listed in an index file.

    The index's global macros are installed on the root of each section
    before the section's own definitions.
    """
    index = load_section_index(path)
    return [
        Section(
            name=entry.name,
            description=entry.description,
            tree=build_from_yaml(entry.path, index.global_macros),
        )
        for entry in index.sections
    ]
