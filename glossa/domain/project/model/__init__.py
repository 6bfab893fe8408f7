"""Project domain models."""
