"""Utilities for dpchange."""
