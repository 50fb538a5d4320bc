"""Validation utilities for dpchange."""
