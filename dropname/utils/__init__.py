"""Utility packages for dropname."""
