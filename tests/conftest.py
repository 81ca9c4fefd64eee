from __future__ import annotations

import os
import random

import numpy as np
import pytest

from activity_selection.catalog import DEFAULT_CATALOG, ActivityCatalog, random_catalog

DEFAULT_SEED = int(os.getenv("ACTIVITY_SELECTION_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture
def reference_catalog() -> ActivityCatalog:
    return DEFAULT_CATALOG


@pytest.fixture(params=range(8))
def random_catalogs(request) -> ActivityCatalog:
    return random_catalog(
        12 + 6 * request.param,
        horizon=20 + 5 * request.param,
        max_duration=2 + request.param,
        seed=DEFAULT_SEED + request.param,
    )
