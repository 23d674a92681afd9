"""Fixtures describing modelguard's module graph and its four layers."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of the installed-from-source modelguard package."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "modelguard")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Map modelguard's packages onto layers, innermost first.

    domain holds ErrorBag, messages and the ports. validators holds the
    rule kinds built on those ports. application holds Record, the
    per-type registry and the runner. infrastructure holds the kind
    registry and the XML, JSON and console adapters.

    Module names carry the 'src.' prefix because the graph is rooted at
    the source directory.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.modelguard.domain"])
        .layer("validators")
        .containing_modules(["src.modelguard.validators"])
        .layer("application")
        .containing_modules(["src.modelguard.application"])
        .layer("infrastructure")
        .containing_modules(["src.modelguard.infrastructure"])
    )
