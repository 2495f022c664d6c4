"""Contrast REST API client and its vendor-shaped response models."""

from .client import ContrastClient
from . import models

__all__ = ["ContrastClient", "models"]
