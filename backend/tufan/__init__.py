"""Tufan Resort billing service package."""
