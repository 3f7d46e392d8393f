"""Pairing systems."""

from .run_through import PairingService

__all__ = ["PairingService"]
