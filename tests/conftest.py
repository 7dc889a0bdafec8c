#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt pytest configuration and shared test fixtures.

The LANPLUS_* settings are pinned before the package is imported, so the
suite never picks up a developer's environment. Tests that need another
setting toggle the package attribute through the fixtures below.
"""

import os

import pytest

os.environ["LANPLUS_DEBUG"] = "False"
os.environ["LANPLUS_RANDOM_SOURCE"] = "system"
os.environ["LANPLUS_FAKE_RANDOM_ALLOWED"] = "False"
os.environ.pop("LANPLUS_ENTROPY_DEVICE", None)

import lanpluscrypt  # noqa: E402  # pylint: disable=wrong-import-position


@pytest.fixture
def fake_random_allowed(monkeypatch: pytest.MonkeyPatch) -> None:
    """Allow construction of the deterministic random source for one test.

    :param monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.setattr(lanpluscrypt, "LANPLUS_FAKE_RANDOM_ALLOWED", True)


@pytest.fixture
def debug_secrets(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable key material dumps in debug logs for one test.

    :param monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.setattr(lanpluscrypt, "LANPLUS_DEBUG", True)
