#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt HMAC engine.

Computes the keyed hashes used by RMCP+ sessions: RAKP authentication codes
(RAKP-HMAC-SHA1) and packet integrity tags (HMAC-SHA1-96). Both are backed by
SHA-1, the only hash this engine supports. Selecting any other algorithm is a
protocol negotiation bug in the caller and is rejected loudly.

The engine always returns the full-length MAC. Cutting it down to the 96-bit
integrity tag is done by the caller.
"""

import logging
from typing import Any, Optional, Union

# Used security modules
from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives import hmac as hmac_cls

import lanpluscrypt
from lanpluscrypt.crypto.exceptions import LanplusUnsupportedAlgorithmError
from lanpluscrypt.exceptions import LanplusLengthError
from lanpluscrypt.utils.algorithms import EnumAuthAlgorithm, EnumIntegrityAlgorithm
from lanpluscrypt.utils.misc import bytes_to_print

logger = logging.getLogger(__name__)

MacAlgorithm = Union[EnumAuthAlgorithm, EnumIntegrityAlgorithm]

# HMAC-SHA1-96 keeps the first 96 bits of the MAC
HMAC_SHA1_96_TAG_LENGTH = 12


def _algorithm_name(algorithm: Any) -> str:
    return getattr(algorithm, "description", None) or repr(algorithm)


def get_mac_hash_algorithm(algorithm: MacAlgorithm) -> hashes.HashAlgorithm:
    """Get hash algorithm instance backing the MAC algorithm.

    Members are matched by identity: authentication and integrity codes overlap
    numerically, and a raw code is not a valid selector.

    :param algorithm: Authentication or integrity algorithm.
    :raises LanplusUnsupportedAlgorithmError: Algorithm is not an HMAC-SHA1 variant.
    :return: Instance of the hash algorithm class.
    """
    if algorithm is EnumAuthAlgorithm.RAKP_HMAC_SHA1:
        return hashes.SHA1()  # nosec
    if algorithm is EnumIntegrityAlgorithm.HMAC_SHA1_96:
        return hashes.SHA1()  # nosec
    raise LanplusUnsupportedAlgorithmError(f"Invalid mac type {_algorithm_name(algorithm)}")


def get_mac_length(algorithm: MacAlgorithm) -> int:
    """Get length of the full MAC produced by the algorithm.

    :param algorithm: Authentication or integrity algorithm.
    :raises LanplusUnsupportedAlgorithmError: Unsupported algorithm.
    :return: MAC length in bytes.
    """
    return get_mac_hash_algorithm(algorithm).digest_size


def get_mac_key_length(algorithm: MacAlgorithm) -> int:
    """Get the key length an RMCP+ session uses with the algorithm.

    RAKP-HMAC-SHA1 is keyed with the 20-byte user key (Kuid, password padded
    with zeros) or Kg. HMAC-SHA1-96 is keyed with the 20-byte K1. In both cases
    the key is as long as the SHA-1 digest.

    :param algorithm: Authentication or integrity algorithm.
    :raises LanplusUnsupportedAlgorithmError: Unsupported algorithm.
    :return: Key length in bytes.
    """
    return get_mac_hash_algorithm(algorithm).digest_size


def get_integrity_tag_length(algorithm: MacAlgorithm) -> int:
    """Get length of the tag that goes on the wire.

    :param algorithm: Authentication or integrity algorithm.
    :raises LanplusUnsupportedAlgorithmError: Unsupported algorithm.
    :return: Tag length in bytes; full MAC length for authentication algorithms.
    """
    mac_length = get_mac_length(algorithm)
    if algorithm is EnumIntegrityAlgorithm.HMAC_SHA1_96:
        return HMAC_SHA1_96_TAG_LENGTH
    return mac_length


def compute_mac(
    algorithm: MacAlgorithm,
    key: bytes,
    data: bytes,
    strict_key_length: bool = False,
    log: Optional[logging.Logger] = None,
) -> bytes:
    """Compute HMAC of data with the key.

    Empty data is valid and yields the MAC of the empty message.

    :param algorithm: Authentication or integrity algorithm.
    :param key: HMAC key of any length.
    :param data: Data to be authenticated.
    :param strict_key_length: Reject keys not matching ``get_mac_key_length``.
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusUnsupportedAlgorithmError: Unsupported algorithm.
    :raises LanplusLengthError: Key length mismatch in strict mode.
    :return: Full-length MAC.
    """
    log = log or logger
    hash_algorithm = get_mac_hash_algorithm(algorithm)
    if strict_key_length and len(key) != get_mac_key_length(algorithm):
        raise LanplusLengthError(
            f"{_algorithm_name(algorithm)} requires a {get_mac_key_length(algorithm)}-byte key,"
            f" got {len(key)} bytes"
        )
    hmac_obj = hmac_cls.HMAC(bytes(key), hash_algorithm)
    hmac_obj.update(bytes(data))
    mac = hmac_obj.finalize()
    if lanpluscrypt.LANPLUS_DEBUG:
        log.debug(f"{_algorithm_name(algorithm)} key: {bytes_to_print(key)}")
    log.debug(f"{_algorithm_name(algorithm)} over {len(data)} bytes: {bytes_to_print(mac)}")
    return mac


def validate_mac(
    algorithm: MacAlgorithm,
    key: bytes,
    data: bytes,
    mac: bytes,
    log: Optional[logging.Logger] = None,
) -> bool:
    """Validate received MAC or integrity tag against the data.

    The received value may be either the full MAC or the algorithm's truncated
    integrity tag. Comparison runs in constant time.

    :param algorithm: Authentication or integrity algorithm.
    :param key: HMAC key.
    :param data: Authenticated data.
    :param mac: Received MAC or tag.
    :param log: Diagnostic sink, the module logger if not given.
    :raises LanplusUnsupportedAlgorithmError: Unsupported algorithm.
    :raises LanplusLengthError: Received value has neither valid length.
    :return: True if the MAC matches, False otherwise.
    """
    valid_lengths = (get_mac_length(algorithm), get_integrity_tag_length(algorithm))
    if len(mac) not in valid_lengths:
        raise LanplusLengthError(
            f"Invalid {_algorithm_name(algorithm)} length {len(mac)}, expected one of"
            f" {sorted(set(valid_lengths))}"
        )
    expected = compute_mac(algorithm, key, data, log=log)
    return constant_time.bytes_eq(expected[: len(mac)], bytes(mac))
