"""Domain layer — intervals, guest expansion, blocks, and the decision policy.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
