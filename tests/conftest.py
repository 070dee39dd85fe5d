# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
import os

import numpy as np
import pytest
from hypothesis import Verbosity, settings

import pauligroup

settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("fast", max_examples=25)
settings.register_profile("thorough", max_examples=2000)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture
def seeded_rng():
    """Replace the package random generator with a seeded one for a single test."""
    original = pauligroup.rng
    pauligroup.rng = np.random.default_rng(seed=123123456)
    yield pauligroup.rng
    pauligroup.rng = original
