#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt random number generation.

Session nonces (the RAKP random numbers) and generated key material come from
here. Two strategies exist:

    - ``system``: the operating system CSPRNG, always used in production
    - ``fake``: a deterministic byte pattern that makes generated values easy to
      spot in packet dumps during protocol conformance testing

The fake strategy can't be constructed unless ``LANPLUS_FAKE_RANDOM_ALLOWED`` is
enabled explicitly, so a production deployment can't fall into it by accident.
"""

import logging
from abc import ABC, abstractmethod
from secrets import token_bytes
from typing import Optional, Union

import lanpluscrypt
from lanpluscrypt.crypto.exceptions import LanplusEntropyError, LanplusFakeRandomError
from lanpluscrypt.exceptions import LanplusLengthError, LanplusTypeError, LanplusValueError
from lanpluscrypt.utils.lanplus_enum import LanplusEnum

logger = logging.getLogger(__name__)


class EnumRandomSource(LanplusEnum):
    """Randomness strategy selector."""

    SYSTEM = (0, "system", "Operating system CSPRNG")
    FAKE = (1, "fake", "Deterministic pattern, protocol conformance testing only")


class RandomSource(ABC):
    """Base class of randomness strategies."""

    strategy: EnumRandomSource

    @abstractmethod
    def get_bytes(self, length: int) -> bytes:
        """Produce ``length`` bytes.

        :param length: Number of bytes to generate.
        :return: Generated bytes.
        """


class SystemRandomSource(RandomSource):
    """Cryptographically secure bytes from the operating system."""

    strategy = EnumRandomSource.SYSTEM

    def get_bytes(self, length: int) -> bytes:
        """Produce ``length`` unpredictable bytes.

        :param length: Number of bytes to generate.
        :raises LanplusEntropyError: The OS randomness source failed.
        :return: Random bytes.
        """
        try:
            return token_bytes(length)
        except OSError as exc:
            raise LanplusEntropyError(f"System random source failed: {exc}") from exc


class FakeRandomSource(RandomSource):
    """Deterministic bytes ``0x70 | index``, never to be used in production.

    The pattern repeats every 256 bytes.
    """

    strategy = EnumRandomSource.FAKE

    def __init__(self) -> None:
        """Initialize the deterministic source.

        :raises LanplusFakeRandomError: LANPLUS_FAKE_RANDOM_ALLOWED is not enabled.
        """
        if not lanpluscrypt.LANPLUS_FAKE_RANDOM_ALLOWED:
            raise LanplusFakeRandomError(
                "Deterministic random source requested, but LANPLUS_FAKE_RANDOM_ALLOWED is not set"
            )
        logger.warning("Deterministic random source in use, generated values are NOT random")

    def get_bytes(self, length: int) -> bytes:
        """Produce ``length`` bytes of the fixed pattern.

        :param length: Number of bytes to generate.
        :return: Pattern bytes.
        """
        return bytes(0x70 | (index & 0xFF) for index in range(length))


def get_random_source(strategy: Optional[Union[EnumRandomSource, str]] = None) -> RandomSource:
    """Get randomness source for the given strategy.

    :param strategy: Strategy member or its label, ``LANPLUS_RANDOM_SOURCE`` if not given.
    :raises LanplusKeyError: Unknown strategy label.
    :raises LanplusFakeRandomError: Fake strategy requested while not allowed.
    :return: Randomness source instance.
    """
    if strategy is None:
        strategy = lanpluscrypt.LANPLUS_RANDOM_SOURCE
    if not isinstance(strategy, EnumRandomSource):
        strategy = EnumRandomSource.from_label(strategy)
    if strategy is EnumRandomSource.FAKE:
        return FakeRandomSource()
    return SystemRandomSource()


def seed_entropy(byte_count: int, entropy_device: Optional[str] = None) -> None:
    """Check the OS entropy device delivers ``byte_count`` bytes.

    Meant to be called once at session start-up. The system strategy reads the
    kernel CSPRNG, which needs no priming from user space, so a successful read
    is the whole seeding step. It only fails if the entropy device is missing or
    short. Retrying is left to the caller.

    :param byte_count: Number of bytes to draw from the device.
    :param entropy_device: Device path, ``LANPLUS_ENTROPY_DEVICE`` if not given.
    :raises LanplusValueError: Negative byte count.
    :raises LanplusEntropyError: Device can't be read or returned too few bytes.
    """
    if byte_count < 0:
        raise LanplusValueError(f"Invalid entropy byte count: {byte_count}")
    device = entropy_device or lanpluscrypt.LANPLUS_ENTROPY_DEVICE
    try:
        with open(device, "rb") as entropy_file:
            seed = entropy_file.read(byte_count)
    except OSError as exc:
        raise LanplusEntropyError(f"Entropy device {device} is not available: {exc}") from exc
    if len(seed) < byte_count:
        raise LanplusEntropyError(
            f"Entropy device {device} returned {len(seed)} of {byte_count} requested bytes"
        )
    logger.debug(f"Read {byte_count} bytes from entropy device {device}")


def random_bytes(length: int, source: Optional[RandomSource] = None) -> bytes:
    """Generate random bytes.

    :param length: The number of random bytes to generate.
    :param source: Randomness source, the configured default if not given.
    :raises LanplusValueError: If length is negative.
    :raises LanplusEntropyError: The source produced fewer bytes than requested.
    :return: Random bytes of specified length.
    """
    if length < 0:
        raise LanplusValueError(f"Invalid random data length: {length}")
    data = (source or get_random_source()).get_bytes(length)
    if len(data) != length:
        raise LanplusEntropyError(f"Random source returned {len(data)} of {length} bytes")
    return data


def fill_random(
    buffer: Union[bytearray, memoryview],
    length: int,
    source: Optional[RandomSource] = None,
    log: Optional[logging.Logger] = None,
) -> None:
    """Fill ``buffer[0:length]`` with random bytes.

    The buffer is written only once all bytes were generated, so on failure it
    keeps its previous content. Any raised error means the buffer must not be
    used for anything security relevant.

    :param buffer: Writable buffer.
    :param length: Number of bytes to fill.
    :param source: Randomness source, the configured default if not given.
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusTypeError: Buffer is not writable.
    :raises LanplusLengthError: Buffer is shorter than length.
    :raises LanplusEntropyError: Random data could not be generated.
    """
    log = log or logger
    if isinstance(buffer, bytes) or (isinstance(buffer, memoryview) and buffer.readonly):
        raise LanplusTypeError("Random data buffer must be writable")
    if length > len(buffer):
        raise LanplusLengthError(f"Buffer of {len(buffer)} bytes can't hold {length} random bytes")
    buffer[:length] = random_bytes(length, source)
    log.debug(f"Filled {length} random bytes")
