"""Service layer package housing core business logic.

Contains the template catalog, variable resolution, rendering, submission
validation, document assembly/export, and the client for the external
drafting/review workflow. Each service is imported by the CLI.
"""
