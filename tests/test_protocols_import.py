"""Protocol module smoke test."""

from __future__ import annotations

from inkwell.data import collections
from inkwell.services import protocols


def test_protocols_module_imports() -> None:
    assert hasattr(protocols, "ContentServiceProtocol")
    assert hasattr(protocols, "SearchServiceProtocol")
    assert hasattr(collections, "SearchableCollection")
