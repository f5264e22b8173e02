"""
Boundary layer for external system integrations.

Holds the adapter for the persistent document store.
"""
