from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("CHECK_GROWTH_REFERENCE_DIR", "CHECK_GROWTH_TARGET_DIR", "CHECK_GROWTH_STRICT"):
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("checkgrowth").setLevel(logging.NOTSET)
