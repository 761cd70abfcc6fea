"""Domain layer — the snake_case grammar and the validated string types.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
