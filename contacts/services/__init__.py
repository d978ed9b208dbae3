"""
Use cases sitting on top of the storage adapters.

Callers (scripts, a future UI) should go through these services instead of
opening the JSON file or the database directly.
"""
