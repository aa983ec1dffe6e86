"""Shared services used across the storefront."""
