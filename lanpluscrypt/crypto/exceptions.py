#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt cryptographic exceptions module.

This module defines the exceptions raised by the randomness source, the MAC
engine and the block cipher codec.
"""

from typing import Optional

from lanpluscrypt.exceptions import LanplusError


class LanplusCryptoError(LanplusError):
    """General lanpluscrypt Crypto Error.

    Base exception class for all failures of the cryptographic primitives.
    """


class LanplusEntropyError(LanplusCryptoError):
    """The OS entropy device could not supply the requested bytes.

    Recoverable by retry in the caller; weaker randomness is never substituted.
    """


class LanplusUnsupportedAlgorithmError(LanplusCryptoError):
    """MAC algorithm requested that this package does not implement.

    This is a programming-contract violation: the session layer negotiated an
    algorithm it then failed to handle. It is not meant to be retried.
    """


class LanplusFakeRandomError(LanplusCryptoError):
    """Deterministic randomness requested while it is not allowed."""


class LanplusPrimitiveError(LanplusCryptoError):
    """The underlying cryptographic library failed.

    The operation is to be treated as fully failed; nothing produced by it may
    be used. The library's own error text is kept in ``reason`` for logging.
    """

    def __init__(self, desc: Optional[str] = None, reason: Optional[str] = None) -> None:
        """Initialize the primitive failure.

        :param desc: Description of the failed operation.
        :param reason: Human-readable diagnostic detail from the crypto library.
        """
        super().__init__(desc)
        self.reason = reason

    def __str__(self) -> str:
        """Return string representation including the library reason if any.

        :return: Formatted exception message as string.
        """
        text = super().__str__()
        if self.reason:
            text += f" ({self.reason})"
        return text
