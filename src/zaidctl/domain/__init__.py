"""Domain layer — reason codes, checksum arithmetic, and the ID decoder.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
