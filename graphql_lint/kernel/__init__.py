"""Linting kernel: schema model, rules, configuration and reporting."""
