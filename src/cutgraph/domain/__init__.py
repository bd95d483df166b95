"""Domain layer: value types, geometry, and canned fixtures.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
