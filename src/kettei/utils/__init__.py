"""Shared utilities for kettei."""
