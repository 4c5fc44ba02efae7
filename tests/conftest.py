"""Pytest configuration and fixtures."""

from typing import List

import pytest

from bank_value.models.item import CachedItem


@pytest.fixture
def two_items() -> List[CachedItem]:
    """Two-item bank: A worth 20, B worth 20 over a larger stack."""
    return [
        CachedItem(name="A", value=10, quantity=2),
        CachedItem(name="B", value=5, quantity=4),
    ]


@pytest.fixture
def bank_items() -> List[CachedItem]:
    """Small bank with distinct names, counts and stack values."""
    return [
        CachedItem(name="Coins", value=1, quantity=250_000),
        CachedItem(name="Abyssal whip", value=1_520_000, quantity=1),
        CachedItem(name="Shark", value=812, quantity=1_250),
        CachedItem(name="Law rune", value=142, quantity=12_000),
        CachedItem(name="Dragon bones", value=2_410, quantity=640),
    ]


@pytest.fixture
def snapshot_file(tmp_path):
    """Write a bank snapshot YAML and return its path."""
    path = tmp_path / "bank.yaml"
    path.write_text(
        "items:\n"
        "  - name: Coins\n"
        "    value: 1\n"
        "    quantity: 2500\n"
        "  - name: Shark\n"
        "    value: 800\n"
        "    quantity: 10\n"
    )
    return path
