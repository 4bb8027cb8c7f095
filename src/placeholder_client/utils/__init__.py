"""Utility helpers for the placeholder client."""
