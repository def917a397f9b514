"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring, the
upstream feed client, settings, the error hierarchy). Feature-specific SQL
lives in the corresponding feature package (e.g. `incidents/`).
"""

