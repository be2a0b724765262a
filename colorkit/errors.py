# Copyright (c) 2026 Colorkit
# SPDX-License-Identifier: MIT

"""
Exception types.

Strict entry points (hex decoding, factory constructors, the minimal
surface) raise these. The general parser never does: it returns None.
"""

from __future__ import annotations


class ColorError(Exception):
    """Base class for all colorkit errors."""


class InvalidColorError(ColorError, ValueError):
    """Input could not be interpreted as a color."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


__all__ = ["ColorError", "InvalidColorError"]
