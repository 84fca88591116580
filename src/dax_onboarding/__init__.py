"""Dax onboarding - contextual first-run tips for a privacy browser."""

__version__ = "0.1.0"
