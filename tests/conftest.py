"""Shared pytest fixtures for alchemist tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from alchemist.core.graphemes import GraphemeList, GraphemeSet
from alchemist.core.synthesis import (
    OrRule,
    SequenceLeaf,
    SetLeaf,
    SynthesisConfig,
    SyllableRoots,
    SyllableVars,
    VariableLeaf,
    WordLengthWeights,
)

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def workspace_file(tmp_path: Path) -> Path:
    """Workspace path inside a temporary directory."""
    return tmp_path / "workspace.json"


# ============================================================================
# Randomness Fixtures
# ============================================================================


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible draws."""
    return np.random.default_rng(1234)


# ============================================================================
# Synthesis Fixtures
# ============================================================================


@pytest.fixture
def cv_vars() -> SyllableVars:
    """Consonant-vowel grammar: every root is ``Onset + Vowel``."""

    def cv() -> OrRule:
        return OrRule.of(VariableLeaf(name="Onset"), VariableLeaf(name="Vowel"))

    return SyllableVars(
        roots=SyllableRoots(initial=cv(), middle=cv(), terminal=cv(), single=cv()),
        variables={
            "Onset": OrRule.of(SetLeaf(graphemes=GraphemeSet(["k", "p", "t"]))),
            "Vowel": OrRule.of(SetLeaf(graphemes=GraphemeSet(["a", "i", "o"]))),
        },
    )


@pytest.fixture
def cv_config(cv_vars: SyllableVars) -> SynthesisConfig:
    """Valid configuration over the consonant-vowel grammar."""
    return SynthesisConfig(
        graphemes=GraphemeSet(["a", "i", "k", "o", "p", "t"]),
        syllable_vars=cv_vars,
        word_lengths=WordLengthWeights(function=[100], content=[0, 50, 50]),
    )


@pytest.fixture
def kat_vars() -> SyllableVars:
    """Grammar whose single-syllable root always spells ``kat``."""
    vars = SyllableVars()
    vars.roots.single = OrRule.of(SequenceLeaf(graphemes=GraphemeList(["k", "a", "t"])))
    return vars
