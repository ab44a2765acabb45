"""Flat schema document, SDL parsing and source line lookup."""
