# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
"""Shared configuration, logging and metrics helpers."""

__version__ = "1.0.0"
