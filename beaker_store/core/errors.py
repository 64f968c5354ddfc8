# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Store Errors — Unified error structure.

Metric operations themselves are total (missing keys read as None),
so the only failures are lifecycle ones.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BeakerError(Exception):
    """Base store error with a machine-readable code."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class StoreNotRunningError(BeakerError):
    def __init__(self, request: str):
        super().__init__(
            code="STORE_NOT_RUNNING",
            message=f"Cannot handle '{request}': coordinator is not running",
            details={"request": request},
        )
