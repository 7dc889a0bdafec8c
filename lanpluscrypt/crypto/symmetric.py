#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt AES-CBC-128 codec.

Encrypts and decrypts confidential RMCP+ payloads. The codec never pads: the
caller applies the IPMI confidentiality trailer (see
``lanpluscrypt.utils.misc.confidentiality_pad``) so the input is already block
aligned, and misaligned input is rejected rather than padded, since any extra
block would corrupt the wire format. Ciphertext is therefore always exactly as
long as the plaintext.

Each call goes INIT -> UPDATE -> FINALIZE on its own cipher context; empty
input succeeds immediately without creating one.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

# Used security modules
from cryptography.exceptions import AlreadyFinalized, InternalError
from cryptography.hazmat.primitives.ciphers import Cipher, CipherContext, algorithms, modes

import lanpluscrypt
from lanpluscrypt.crypto.exceptions import LanplusPrimitiveError
from lanpluscrypt.exceptions import LanplusLengthError, LanplusTypeError
from lanpluscrypt.utils.algorithms import AES_CBC_128_BLOCK_SIZE, AES_CBC_128_KEY_SIZE
from lanpluscrypt.utils.misc import bytes_to_print, check_block_alignment

logger = logging.getLogger(__name__)

BufferType = Union[bytes, bytearray, memoryview]


def _check_key_and_iv(iv: BufferType, key: BufferType) -> None:
    if len(key) != AES_CBC_128_KEY_SIZE:
        raise LanplusLengthError(
            f"The AES-CBC-128 key must be {AES_CBC_128_KEY_SIZE} bytes long, got {len(key)}"
        )
    if len(iv) != AES_CBC_128_BLOCK_SIZE:
        raise LanplusLengthError(
            f"The initial vector length must be {AES_CBC_128_BLOCK_SIZE} bytes, got {len(iv)}"
        )


@contextmanager
def cipher_context(iv: bytes, key: bytes, decrypt: bool) -> Iterator[CipherContext]:
    """Acquire an AES-CBC-128 cipher context for one operation.

    The context is released on every exit path, including failures during
    update or finalize.

    :param iv: 16-byte initialization vector.
    :param key: 16-byte AES key.
    :param decrypt: Create a decryptor instead of an encryptor.
    :return: Iterator yielding the cipher context.
    """
    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    context = cipher.decryptor() if decrypt else cipher.encryptor()
    try:
        yield context
    finally:
        # drop the only reference, the backend frees the context with it
        del context


def _aes_cbc_128(
    iv: BufferType, key: BufferType, data: BufferType, decrypt: bool, log: logging.Logger
) -> bytes:
    operation = "decrypt" if decrypt else "encrypt"
    _check_key_and_iv(iv, key)
    if not data:
        log.debug(f"Nothing to {operation}")
        return b""
    check_block_alignment(data, AES_CBC_128_BLOCK_SIZE)

    log.debug(f"{operation.capitalize()}ing with this IV: {bytes_to_print(iv)}")
    if lanpluscrypt.LANPLUS_DEBUG:
        log.debug(f"{operation.capitalize()}ing with this key: {bytes_to_print(key)}")
    log.debug(f"{operation.capitalize()}ing this data: {bytes_to_print(data)}")

    with cipher_context(bytes(iv), bytes(key), decrypt) as context:
        try:
            output = context.update(bytes(data))
        except (ValueError, InternalError, AlreadyFinalized) as exc:
            if decrypt:
                log.error(f"AES-CBC-128 decrypt update failed: {exc}")
            raise LanplusPrimitiveError(f"AES-CBC-128 {operation} update failed", str(exc)) from exc
        try:
            output += context.finalize()
        except (ValueError, InternalError, AlreadyFinalized) as exc:
            if decrypt:
                log.error(f"AES-CBC-128 decrypt final failed: {exc}")
            raise LanplusPrimitiveError(f"AES-CBC-128 {operation} final failed", str(exc)) from exc

    if len(output) != len(data):
        raise LanplusPrimitiveError(
            f"AES-CBC-128 {operation} produced {len(output)} bytes from {len(data)} input bytes"
        )
    if decrypt:
        log.debug(f"Decrypted {len(data)} encrypted bytes: {bytes_to_print(output)}")
    return output


def _aes_cbc_128_into(
    iv: BufferType,
    key: BufferType,
    data: BufferType,
    output: Union[bytearray, memoryview],
    decrypt: bool,
    log: logging.Logger,
) -> int:
    if isinstance(output, bytes) or (isinstance(output, memoryview) and output.readonly):
        raise LanplusTypeError("Output buffer must be writable")
    if len(output) < len(data):
        raise LanplusLengthError(
            f"Output buffer of {len(output)} bytes can't hold {len(data)} bytes"
        )
    result = _aes_cbc_128(iv, key, data, decrypt, log)
    # the caller's buffer is touched only after the whole operation succeeded
    output[: len(result)] = result
    return len(result)


def aes_cbc_128_encrypt(
    iv: BufferType, key: BufferType, data: BufferType, log: Optional[logging.Logger] = None
) -> bytes:
    """Encrypt block aligned data with AES-CBC-128.

    :param iv: 16-byte initialization vector.
    :param key: 16-byte AES key.
    :param data: Plain data, a multiple of 16 bytes long (may be empty).
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusLengthError: Invalid key or IV length.
    :raises LanplusAlignmentError: Data is not block aligned.
    :raises LanplusPrimitiveError: The cipher failed.
    :return: Encrypted data, as long as the input.
    """
    return _aes_cbc_128(iv, key, data, decrypt=False, log=log or logger)


def aes_cbc_128_decrypt(
    iv: BufferType, key: BufferType, data: BufferType, log: Optional[logging.Logger] = None
) -> bytes:
    """Decrypt block aligned data with AES-CBC-128.

    On failure the library's error text is logged and kept in the ``reason``
    of the raised ``LanplusPrimitiveError``.

    :param iv: 16-byte initialization vector.
    :param key: 16-byte AES key.
    :param data: Encrypted data, a multiple of 16 bytes long (may be empty).
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusLengthError: Invalid key or IV length.
    :raises LanplusAlignmentError: Data is not block aligned.
    :raises LanplusPrimitiveError: The cipher failed.
    :return: Decrypted data, as long as the input.
    """
    return _aes_cbc_128(iv, key, data, decrypt=True, log=log or logger)


def aes_cbc_128_encrypt_into(
    iv: BufferType,
    key: BufferType,
    data: BufferType,
    output: Union[bytearray, memoryview],
    log: Optional[logging.Logger] = None,
) -> int:
    """Encrypt block aligned data into a caller allocated buffer.

    :param iv: 16-byte initialization vector.
    :param key: 16-byte AES key.
    :param data: Plain data, a multiple of 16 bytes long (may be empty).
    :param output: Writable buffer at least as long as the data.
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusTypeError: Output buffer is not writable.
    :raises LanplusLengthError: Invalid key, IV or output buffer length.
    :raises LanplusAlignmentError: Data is not block aligned.
    :raises LanplusPrimitiveError: The cipher failed, output is left untouched.
    :return: Number of bytes written.
    """
    return _aes_cbc_128_into(iv, key, data, output, decrypt=False, log=log or logger)


def aes_cbc_128_decrypt_into(
    iv: BufferType,
    key: BufferType,
    data: BufferType,
    output: Union[bytearray, memoryview],
    log: Optional[logging.Logger] = None,
) -> int:
    """Decrypt block aligned data into a caller allocated buffer.

    :param iv: 16-byte initialization vector.
    :param key: 16-byte AES key.
    :param data: Encrypted data, a multiple of 16 bytes long (may be empty).
    :param output: Writable buffer at least as long as the data.
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusTypeError: Output buffer is not writable.
    :raises LanplusLengthError: Invalid key, IV or output buffer length.
    :raises LanplusAlignmentError: Data is not block aligned.
    :raises LanplusPrimitiveError: The cipher failed, output is left untouched.
    :return: Number of bytes written.
    """
    return _aes_cbc_128_into(iv, key, data, output, decrypt=True, log=log or logger)
