"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Any

from conventor.bidding.models import DOUBLE, PASS, REDOUBLE, Call, Strain
from conventor.config.defaults import ExpansionParams, PruneParams


@pytest.fixture
def one_club() -> Call:
    return Call(1, Strain.CLUBS)


@pytest.fixture
def sentinels() -> tuple[Call, Call, Call]:
    return PASS, DOUBLE, REDOUBLE


@pytest.fixture
def expansion_params() -> ExpansionParams:
    """Default suit choices for wildcard binding."""
    return ExpansionParams()


@pytest.fixture
def prune_params() -> PruneParams:
    return PruneParams()


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Small system exercising macros, wildcards, alternation and steps."""
    return {
        "define": {"HCP": "high card points"},
        "1C": "16+ HCP, artificial",
        "1M": {
            "description": "5+ $M, 11-15 HCP",
            "2M": "simple raise in $M",
            "3OM": "ignored opaque key",
        },
        "1NT": {
            "description": "14-16 HCP",
            "2C![Stayman]": {
                "description": "asks for a major",
                "steps": [
                    "no major",
                    "4 hearts",
                    "4 spades",
                ],
            },
            "3m|2NT": "invitational",
        },
    }


@pytest.fixture
def section_files(tmp_path: Path) -> Path:
    """Section index with two section files; returns the index path."""
    (tmp_path / "openings.yaml").write_text(
        "1C: strong, $ART\n"
        "1NT: 14-16 HCP\n",
        encoding="utf-8",
    )
    (tmp_path / "defence.yaml").write_text(
        "1H-X: takeout\n",
        encoding="utf-8",
    )
    index = tmp_path / "system.yaml"
    index.write_text(
        "define:\n"
        "  \\$ART: artificial\n"
        "sections:\n"
        "  - name: Openings\n"
        "    description: First-seat openings\n"
        "    path: openings.yaml\n"
        "  - name: Defence\n"
        "    path: defence.yaml\n",
        encoding="utf-8",
    )
    return index
