"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging, validation, store error mapping). Feature-specific SQL
lives in the feature package (e.g. `cards/repository.py`).
"""
