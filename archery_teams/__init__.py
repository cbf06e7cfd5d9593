# FILE: archery_teams/__init__.py
"""
archery_teams package: roster loading, random team mapping, balance scoring,
the patience-bounded search, and report output.
"""
__version__ = "0.1.0"

__all__ = [
    "constants",
    "models",
    "validation",
    "io",
    "assignment",
    "fairness",
    "search",
    "scheduler",
    "config",
    "export_pdf",
    "cli",
]
