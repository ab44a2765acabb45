"""Lint rules, validators and suppression matching."""
