"""Renderers for highlight results."""
