"""Bike-share ride analytics: seasonal usage, station imbalance, rider speed and route rankings."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ridestats")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.0.0"
