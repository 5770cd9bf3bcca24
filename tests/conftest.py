# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- reset_logging: undo configure_logging() (use in tests that run the CLI)
- write_document: write a graph document (JSON or YAML) into tmp_path
- scenario_b: the canonical "every node reaches the root" description

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from hypothesis import Phase, Verbosity, settings
from structlog.stdlib import ProcessorFormatter

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def reset_logging() -> Any:
    """Undo any logging configuration a test (e.g. a CLI run) applied."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scenario_b() -> dict[str, Any]:
    """A -> root with B -> A and C -> B: every node reaches the root."""
    return {
        "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
        "root": "A",
        "edges": [{"from": "B", "to": "A"}, {"from": "C", "to": "B"}],
        "deletedEdge": [],
    }


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a document and returns its path.

    The suffix decides the encoding: .yaml/.yml are written as YAML,
    anything else as JSON.
    """

    def _write(content: dict[str, Any] | str, name: str = "graph.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        elif path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(content, sort_keys=False), encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
