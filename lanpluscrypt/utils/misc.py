#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt miscellaneous helpers for binary buffers.

Alignment checks used by the block cipher codec, the IPMI confidentiality
trailer that callers apply before encryption, and a hex formatter for debug
logs.
"""

from typing import Optional, Union

from lanpluscrypt.exceptions import LanplusAlignmentError, LanplusError, LanplusParsingError
from lanpluscrypt.utils.algorithms import AES_CBC_128_BLOCK_SIZE


def align(number: int, alignment: int = 4) -> int:
    """Align number up to the nearest multiple of alignment.

    :param number: The number to be aligned (size or address).
    :param alignment: The boundary alignment value.
    :return: Aligned number that is always greater than or equal to the input number.
    :raises LanplusError: When alignment is non-positive or number is negative.
    """
    if alignment <= 0 or number < 0:
        raise LanplusError("Wrong alignment")

    return (number + (alignment - 1)) // alignment * alignment


def check_block_alignment(
    data: Union[bytes, bytearray, memoryview], block_size: int = AES_CBC_128_BLOCK_SIZE
) -> None:
    """Check that the data length is a multiple of the cipher block size.

    An empty buffer is aligned.

    :param data: Data to be checked.
    :param block_size: Cipher block size in bytes.
    :raises LanplusAlignmentError: When the data length is not block aligned.
    """
    if len(data) != align(len(data), block_size):
        raise LanplusAlignmentError(
            f"Input length {len(data)} is not a multiple of the {block_size}-byte block size"
        )


def confidentiality_pad(payload: bytes, block_size: int = AES_CBC_128_BLOCK_SIZE) -> bytes:
    """Append the IPMI confidentiality trailer to a payload.

    IPMI v2.0 table 13-20 pads AES-CBC-128 payloads with the bytes 0x01, 0x02, ...
    followed by a single pad length byte, so that payload, pad and pad length
    together fill whole cipher blocks.

    :param payload: Plain payload data.
    :param block_size: Cipher block size in bytes.
    :return: Payload with the confidentiality trailer, block aligned.
    """
    # the pad length byte itself counts toward the alignment
    pad_length = align(len(payload) + 1, block_size) - len(payload) - 1
    return bytes(payload) + bytes(range(1, pad_length + 1)) + bytes([pad_length])


def confidentiality_unpad(data: bytes, block_size: int = AES_CBC_128_BLOCK_SIZE) -> bytes:
    """Strip and verify the IPMI confidentiality trailer.

    :param data: Decrypted data ending with pad bytes and pad length.
    :param block_size: Cipher block size in bytes.
    :return: The payload without the trailer.
    :raises LanplusParsingError: When the trailer is missing or corrupted.
    """
    if not data:
        raise LanplusParsingError("No data to remove confidentiality trailer from")
    pad_length = data[-1]
    if pad_length >= block_size or pad_length + 1 > len(data):
        raise LanplusParsingError(f"Invalid confidentiality pad length {pad_length}")
    payload_end = len(data) - pad_length - 1
    if data[payload_end:-1] != bytes(range(1, pad_length + 1)):
        raise LanplusParsingError("Corrupted confidentiality pad")
    return bytes(data[:payload_end])


def bytes_to_print(
    data: Optional[Union[bytes, bytearray, memoryview]],
    max_length: int = 32,
    unavailable_text: str = "Not available",
) -> str:
    """Format bytes data for display with length-based truncation.

    :param data: Bytes data to format, can be None or empty.
    :param max_length: Maximum number of bytes to display before truncation.
    :param unavailable_text: Text to show when data is None or empty.
    :return: Formatted string representation of the bytes data.
    """
    if not data:
        return unavailable_text

    data = bytes(data)
    if len(data) <= max_length:
        return data.hex()

    return f"{data[:max_length].hex()}...(truncated to {max_length}, total {len(data)})"
