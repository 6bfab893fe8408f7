"""Dependency injection helpers."""
