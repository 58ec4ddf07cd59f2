"""Utility helpers for the application wizard."""
