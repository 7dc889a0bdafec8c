#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt - cryptographic primitives for IPMI v2.0 RMCP+ (LAN+) sessions.

The package supplies the three primitives a LAN+ session layer needs:

    - a randomness source for session nonces and key material
    - an HMAC engine for RAKP authentication codes and integrity tags
    - an AES-CBC-128 codec for confidential session payloads

All of them are thin adapters over the pyca cryptography library. Session state,
packet framing and algorithm negotiation stay with the caller.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse


def get_lanplus_version() -> Version:
    """Get lanpluscrypt version information.

    :return: Parsed version object of the package.
    """
    from .__version__ import __version__ as lanplus_version

    return parse(lanplus_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_lanplus_version()

__author__ = "lanpluscrypt developers"
__license__ = "BSD-3-Clause"
__version__ = str(version)
__release__ = "beta"


# The lanpluscrypt behavior settings
# LANPLUS_DEBUG allows key material to be dumped into debug logs
LANPLUS_DEBUG = value_to_bool(os.environ.get("LANPLUS_DEBUG"))

# LANPLUS_RANDOM_SOURCE selects the default randomness strategy ("system" or "fake")
LANPLUS_RANDOM_SOURCE = os.environ.get("LANPLUS_RANDOM_SOURCE", "system")

# The deterministic "fake" randomness exists only for protocol conformance testing.
# It can't be constructed unless this setting is enabled explicitly.
LANPLUS_FAKE_RANDOM_ALLOWED = value_to_bool(os.environ.get("LANPLUS_FAKE_RANDOM_ALLOWED"))

LANPLUS_ENTROPY_DEVICE = os.environ.get("LANPLUS_ENTROPY_DEVICE", "/dev/urandom")
