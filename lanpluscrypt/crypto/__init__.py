#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""lanpluscrypt cryptographic operations module.

This module groups the randomness source, the HMAC engine, the AES-CBC-128
codec and the RMCP+ key derivation helpers.
"""
