"""Utility helpers for isowave."""
