"""Fixed legal prose for the contract catalog.

Each module holds the body text of one template (and its schedules or
exhibits) as module-level string constants with ``${name}`` placeholders.
Field schemas and defaults live in ``contractdesk.services.catalog_service``.
"""
