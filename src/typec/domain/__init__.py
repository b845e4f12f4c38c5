"""Domain layer — markers, type tags, and descriptors.

This layer depends only on stdlib and pydantic.
It must never import from checks, validator, or config.
"""
