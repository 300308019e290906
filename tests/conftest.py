"""Shared fixtures for foldtree tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def small_outline() -> str:
    """Two roots, the first with two leaf children.

    Structure::

        One
            One.One
            One.Two
        Two
    """
    return "One\n\tOne.One\n\tOne.Two\nTwo\n"


@pytest.fixture
def deep_outline() -> str:
    """Outline with multi-level dedents and a six-deep branch."""
    return "\n".join(
        [
            "One",
            "\tOne.One",
            "\tOne.Two",
            "Two",
            "\tTwo.One",
            "\t\tTwo.One.One",
            "\t\tTwo.One.Two",
            "\tTwo.Two",
            "Three",
            "Four",
            "\tFour.One",
            "\tFour.Two",
            "\tFour.Three",
            "\t\tFour.Three.One",
            "\t\t\tFour.Three.One.One",
            "\t\t\t\tFour.Three.One.One.One",
            "\t\t\t\t\tFour.Three.One.One.One.One",
            "\t\t\t\t\tFour.Three.One.One.One.Two",
            "\t\t\t\tFour.Three.One.One.Two",
            "\t\t\t\tFour.Three.One.One.Three",
            "Five",
        ]
    )


@pytest.fixture
def deep_outline_expected() -> str:
    return (
        "├── One\n"
        "│   ├── One.One\n"
        "│   └── One.Two\n"
        "├── Two\n"
        "│   ├── Two.One\n"
        "│   │   ├── Two.One.One\n"
        "│   │   └── Two.One.Two\n"
        "│   └── Two.Two\n"
        "├── Three\n"
        "├── Four\n"
        "│   ├── Four.One\n"
        "│   ├── Four.Two\n"
        "│   └── Four.Three\n"
        "│       └── Four.Three.One\n"
        "│           └── Four.Three.One.One\n"
        "│               ├── Four.Three.One.One.One\n"
        "│               │   ├── Four.Three.One.One.One.One\n"
        "│               │   └── Four.Three.One.One.One.Two\n"
        "│               ├── Four.Three.One.One.Two\n"
        "│               └── Four.Three.One.One.Three\n"
        "└── Five\n"
    )
