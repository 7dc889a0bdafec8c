#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt RNG (Random Number Generator) testing module.

Covers the system and deterministic randomness strategies, the production
guard of the deterministic one, buffer filling and entropy seeding.
"""

import logging
import os
from pathlib import Path

import pytest

import lanpluscrypt
from lanpluscrypt.crypto import rng
from lanpluscrypt.crypto.exceptions import LanplusEntropyError, LanplusFakeRandomError
from lanpluscrypt.crypto.rng import (
    EnumRandomSource,
    FakeRandomSource,
    RandomSource,
    SystemRandomSource,
    fill_random,
    get_random_source,
    random_bytes,
    seed_entropy,
)
from lanpluscrypt.exceptions import (
    LanplusKeyError,
    LanplusLengthError,
    LanplusTypeError,
    LanplusValueError,
)


class ShortRandomSource(RandomSource):
    """Broken source returning one byte less than requested."""

    strategy = EnumRandomSource.SYSTEM

    def get_bytes(self, length: int) -> bytes:
        return bytes(max(length - 1, 0))


def test_random_bytes() -> None:
    """Test random bytes generation functionality.

    Two draws of the same length must differ with overwhelming probability.
    """
    random = random_bytes(16)
    assert isinstance(random, bytes)
    assert len(random) == 16
    assert random != random_bytes(16)


def test_random_bytes_zero_length() -> None:
    assert random_bytes(0) == b""


def test_random_bytes_negative_length() -> None:
    with pytest.raises(LanplusValueError):
        random_bytes(-1)


def test_random_bytes_short_source() -> None:
    with pytest.raises(LanplusEntropyError):
        random_bytes(16, source=ShortRandomSource())


def test_fill_random() -> None:
    """Test filling of caller allocated buffers with system randomness."""
    first = bytearray(20)
    second = bytearray(20)
    fill_random(first, 20)
    fill_random(second, 20)
    assert first != second
    assert first != bytearray(20)


def test_fill_random_partial() -> None:
    """Only the requested prefix of the buffer is overwritten."""
    buffer = bytearray(b"\xaa" * 32)
    fill_random(buffer, 16)
    assert buffer[16:] == b"\xaa" * 16


def test_fill_random_memoryview() -> None:
    backing = bytearray(24)
    fill_random(memoryview(backing)[8:], 16)
    assert backing[:8] == bytes(8)


@pytest.mark.parametrize("buffer", [bytes(16), memoryview(bytes(16))])
def test_fill_random_read_only_buffer(buffer: bytes) -> None:
    with pytest.raises(LanplusTypeError):
        fill_random(buffer, 16)  # type: ignore[arg-type]


def test_fill_random_buffer_too_small() -> None:
    with pytest.raises(LanplusLengthError):
        fill_random(bytearray(8), 16)


def test_fill_random_failure_keeps_buffer(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing OS source raises and leaves the buffer untouched.

    :param monkeypatch: Pytest monkeypatch fixture.
    """

    def broken_token_bytes(length: int) -> bytes:
        raise OSError("no entropy")

    monkeypatch.setattr(rng, "token_bytes", broken_token_bytes)
    buffer = bytearray(b"\x55" * 16)
    with pytest.raises(LanplusEntropyError):
        fill_random(buffer, 16)
    assert buffer == b"\x55" * 16


def test_fill_random_short_source_keeps_buffer() -> None:
    buffer = bytearray(16)
    with pytest.raises(LanplusEntropyError):
        fill_random(buffer, 16, source=ShortRandomSource())
    assert buffer == bytearray(16)


def test_fill_random_injected_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Diagnostics go to the logger passed in by the caller.

    :param caplog: Pytest log capture fixture.
    """
    session_logger = logging.getLogger("session.under.test")
    caplog.set_level(logging.DEBUG, logger="session.under.test")
    fill_random(bytearray(4), 4, log=session_logger)
    assert [record.name for record in caplog.records] == ["session.under.test"]


def test_default_source_is_system() -> None:
    source = get_random_source()
    assert isinstance(source, SystemRandomSource)
    assert source.strategy == "system"


def test_fake_source_not_allowed() -> None:
    """The deterministic source can't be built without the explicit setting."""
    assert not lanpluscrypt.LANPLUS_FAKE_RANDOM_ALLOWED
    with pytest.raises(LanplusFakeRandomError):
        FakeRandomSource()
    with pytest.raises(LanplusFakeRandomError):
        get_random_source(EnumRandomSource.FAKE)


def test_fake_source_selected_by_setting_not_allowed(monkeypatch: pytest.MonkeyPatch) -> None:
    """Selecting "fake" through LANPLUS_RANDOM_SOURCE alone is not enough.

    :param monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.setattr(lanpluscrypt, "LANPLUS_RANDOM_SOURCE", "fake")
    with pytest.raises(LanplusFakeRandomError):
        random_bytes(16)


def test_unknown_source_label() -> None:
    with pytest.raises(LanplusKeyError):
        get_random_source("dice")


@pytest.mark.usefixtures("fake_random_allowed")
def test_fake_source_pattern(caplog: pytest.LogCaptureFixture) -> None:
    """Test the deterministic source produces the fixed, reproducible pattern.

    :param caplog: Pytest log capture fixture.
    """
    source = get_random_source("FAKE")
    assert isinstance(source, FakeRandomSource)
    assert "NOT random" in caplog.text

    assert source.get_bytes(4) == b"\x70\x71\x72\x73"
    assert source.get_bytes(16)[15] == 0x7F
    assert source.get_bytes(0x90)[0x8F] == 0xFF
    # pattern repeats every 256 bytes
    long_data = source.get_bytes(300)
    assert long_data[256:] == long_data[:44]

    first = bytearray(32)
    second = bytearray(32)
    fill_random(first, 32, source=source)
    fill_random(second, 32, source=source)
    assert first == second


@pytest.mark.usefixtures("fake_random_allowed")
def test_fake_source_selected_by_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    """Selecting "fake" works once the deterministic source is allowed.

    :param monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.setattr(lanpluscrypt, "LANPLUS_RANDOM_SOURCE", "fake")
    assert random_bytes(3) == b"\x70\x71\x72"


def test_seed_entropy_from_file(tmp_path: Path) -> None:
    """Test seeding from a device that has enough bytes.

    :param tmp_path: Pytest temporary directory.
    """
    device = os.path.join(tmp_path, "entropy")
    with open(device, "wb") as f:
        f.write(bytes(range(8)))
    seed_entropy(8, entropy_device=device)
    seed_entropy(0, entropy_device=device)


def test_seed_entropy_short_device(tmp_path: Path) -> None:
    """Test seeding fails when the device has fewer bytes than requested.

    :param tmp_path: Pytest temporary directory.
    """
    device = os.path.join(tmp_path, "entropy")
    with open(device, "wb") as f:
        f.write(bytes(4))
    with pytest.raises(LanplusEntropyError):
        seed_entropy(8, entropy_device=device)


def test_seed_entropy_missing_device(tmp_path: Path) -> None:
    """Test seeding fails when the device does not exist.

    :param tmp_path: Pytest temporary directory.
    """
    with pytest.raises(LanplusEntropyError):
        seed_entropy(16, entropy_device=os.path.join(tmp_path, "no_such_device"))


def test_seed_entropy_configured_device(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The device falls back to the LANPLUS_ENTROPY_DEVICE setting.

    :param tmp_path: Pytest temporary directory.
    :param monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.setattr(
        lanpluscrypt, "LANPLUS_ENTROPY_DEVICE", os.path.join(tmp_path, "no_such_device")
    )
    with pytest.raises(LanplusEntropyError):
        seed_entropy(16)


def test_seed_entropy_negative() -> None:
    with pytest.raises(LanplusValueError):
        seed_entropy(-1)


@pytest.mark.skipif(not os.path.exists("/dev/urandom"), reason="No /dev/urandom")
def test_seed_entropy_default_device() -> None:
    seed_entropy(32)
