"""Persistence infrastructure."""
