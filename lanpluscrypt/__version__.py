#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Version of the lanpluscrypt package."""

__version__ = "0.1.0"
