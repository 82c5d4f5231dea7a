"""Presentation layer - interactive text menu."""
