"""Utility helpers for mdguide."""
