"""Record store application for the HealthSight demo backend.

This package holds the in-memory record store, the query and mutation
functions built on it, and the REST views that expose them to the
front-end pages.
"""
