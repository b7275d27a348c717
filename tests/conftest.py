from __future__ import annotations

from typing import List

import pytest

from fixdec.core import MAX_PRECISION, UDec64
from fixdec.locales import LOCALE_FORMATS


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sample_magnitude() -> UDec64:
    """1234567890.1234567891 at precision 10 (0xab54a98ceb1f0ad3)."""
    return UDec64(0xab54a98ceb1f0ad3)


@pytest.fixture()
def all_precisions() -> List[int]:
    return list(range(MAX_PRECISION + 1))


@pytest.fixture()
def locale_tags() -> List[str]:
    return sorted(LOCALE_FORMATS)
