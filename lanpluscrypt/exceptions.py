#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt exception classes.

This module defines the hierarchy of exceptions used throughout the package.
Every failure of a primitive is reported by raising one of them; no primitive
signals failure through a return value.
"""

from typing import Optional

#######################################################################
# # LAN+ crypto Exceptions
#######################################################################


class LanplusError(Exception):
    """lanpluscrypt Base Exception.

    Base exception class for all lanpluscrypt errors.

    :cvar fmt: Default error message format template.
    """

    fmt = "LANPLUS: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base lanpluscrypt Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class LanplusKeyError(LanplusError, KeyError):
    """Lookup of an enumeration member or a mapping key failed."""


class LanplusValueError(LanplusError, ValueError):
    """lanpluscrypt standard value error exception."""


class LanplusTypeError(LanplusError, TypeError):
    """lanpluscrypt standard type error exception."""


class LanplusLengthError(LanplusError, ValueError):
    """Key, IV, tag or buffer length violates the primitive's contract.

    Raised for instance for an AES key that is not 16 bytes long or an output
    buffer that can't hold the transformed data.
    """


class LanplusAlignmentError(LanplusError, ValueError):
    """Cipher input is not aligned to the block size.

    The caller owns the padding scheme, so misaligned input is a precondition
    violation. It is never padded silently.
    """


class LanplusParsingError(LanplusError):
    """Binary data (e.g. a confidentiality trailer) could not be parsed."""
