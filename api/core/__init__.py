"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
schema, settings, error conversion). Feature-specific SQL stays in the
feature package (e.g. `enrollment/repository.py`).
"""
