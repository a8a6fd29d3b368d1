"""Utility helpers for mazegraph."""
