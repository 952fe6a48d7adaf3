"""Utility modules for arbor."""
