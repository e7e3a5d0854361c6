"""Shared utilities for dumbdown."""
