"""Linter configuration models and loader."""
