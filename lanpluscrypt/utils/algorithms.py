#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""IPMI v2.0 RMCP+ algorithm identifiers.

The authentication, integrity and confidentiality algorithms are numbered in
separate tables of the IPMI v2.0 specification (13-17, 13-18 and 13-19) and
their codes overlap, so each table gets its own enumeration.
"""

from lanpluscrypt.utils.lanplus_enum import LanplusEnum

# AES works on 128 bit blocks regardless of the key size
AES_CBC_128_BLOCK_SIZE = 16
AES_CBC_128_KEY_SIZE = 16


class EnumAuthAlgorithm(LanplusEnum):
    """RAKP authentication algorithms (IPMI v2.0 table 13-17)."""

    RAKP_NONE = (0x00, "rakp_none", "RAKP-none")
    RAKP_HMAC_SHA1 = (0x01, "rakp_hmac_sha1", "RAKP-HMAC-SHA1")
    RAKP_HMAC_MD5 = (0x02, "rakp_hmac_md5", "RAKP-HMAC-MD5")
    RAKP_HMAC_SHA256 = (0x03, "rakp_hmac_sha256", "RAKP-HMAC-SHA256")


class EnumIntegrityAlgorithm(LanplusEnum):
    """Session integrity algorithms (IPMI v2.0 table 13-18)."""

    NONE = (0x00, "none", "None")
    HMAC_SHA1_96 = (0x01, "hmac_sha1_96", "HMAC-SHA1-96")
    HMAC_MD5_128 = (0x02, "hmac_md5_128", "HMAC-MD5-128")
    MD5_128 = (0x03, "md5_128", "MD5-128")
    HMAC_SHA256_128 = (0x04, "hmac_sha256_128", "HMAC-SHA256-128")


class EnumConfidentialityAlgorithm(LanplusEnum):
    """Session confidentiality algorithms (IPMI v2.0 table 13-19)."""

    NONE = (0x00, "none", "None")
    AES_CBC_128 = (0x01, "aes_cbc_128", "AES-CBC-128")
    XRC4_128 = (0x02, "xrc4_128", "xRC4-128")
    XRC4_40 = (0x03, "xrc4_40", "xRC4-40")
