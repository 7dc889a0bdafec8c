#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt RMCP+ additional key derivation.

Once RAKP has produced the Session Integrity Key (SIK), IPMI v2.0 section 13.32
derives the additional keying material from it:

    - K1 = HMAC(SIK, 0x01 * 20), the HMAC-SHA1-96 integrity key
    - K2 = HMAC(SIK, 0x02 * 20), whose first 16 bytes are the AES-CBC-128 key

With RAKP-none authentication there is no HMAC and the constants themselves are
used.
"""

import logging
from typing import Optional

from lanpluscrypt.crypto.lanplus_hmac import compute_mac
from lanpluscrypt.exceptions import LanplusLengthError
from lanpluscrypt.utils.algorithms import AES_CBC_128_KEY_SIZE, EnumAuthAlgorithm

# constants are as long as the SHA-1 digest
CONST_1 = b"\x01" * 20
CONST_2 = b"\x02" * 20


def _derive(
    sik: bytes, constant: bytes, algorithm: EnumAuthAlgorithm, log: Optional[logging.Logger]
) -> bytes:
    if algorithm is EnumAuthAlgorithm.RAKP_NONE:
        return constant
    return compute_mac(algorithm, sik, constant, log=log)


def derive_k1(
    sik: bytes, algorithm: EnumAuthAlgorithm, log: Optional[logging.Logger] = None
) -> bytes:
    """Derive the integrity key K1 from the session integrity key.

    :param sik: Session integrity key produced by RAKP.
    :param algorithm: Negotiated RAKP authentication algorithm.
    :param log: Diagnostic sink, the HMAC module logger if not given.
    :raises LanplusUnsupportedAlgorithmError: Unsupported authentication algorithm.
    :return: K1.
    """
    return _derive(sik, CONST_1, algorithm, log)


def derive_k2(
    sik: bytes, algorithm: EnumAuthAlgorithm, log: Optional[logging.Logger] = None
) -> bytes:
    """Derive the confidentiality key K2 from the session integrity key.

    :param sik: Session integrity key produced by RAKP.
    :param algorithm: Negotiated RAKP authentication algorithm.
    :param log: Diagnostic sink, the HMAC module logger if not given.
    :raises LanplusUnsupportedAlgorithmError: Unsupported authentication algorithm.
    :return: K2.
    """
    return _derive(sik, CONST_2, algorithm, log)


def derive_aes_key(k2: bytes) -> bytes:
    """Get the AES-CBC-128 key, the first 16 bytes of K2.

    :param k2: Confidentiality key K2.
    :raises LanplusLengthError: K2 is too short.
    :return: 16-byte AES key.
    """
    if len(k2) < AES_CBC_128_KEY_SIZE:
        raise LanplusLengthError(
            f"K2 must be at least {AES_CBC_128_KEY_SIZE} bytes long, got {len(k2)}"
        )
    return bytes(k2[:AES_CBC_128_KEY_SIZE])
