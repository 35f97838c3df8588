"""Shared stream model, errors and logging helpers."""
