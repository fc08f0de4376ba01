# Copyright (c) 2024 Normtmp Contributors
# MIT License

"""Normtmp release metadata."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Normtmp Contributors"
