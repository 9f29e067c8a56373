"""Prefill flattening exports."""

from .document_flattener import flatten

__all__ = ["flatten"]
