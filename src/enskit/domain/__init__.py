"""Domain layer — hashing, validation, and name rules.

This layer depends only on stdlib, pydantic, and pycryptodome.
It must never import from services, commands, output, or config.
"""
