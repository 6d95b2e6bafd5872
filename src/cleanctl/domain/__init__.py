"""Domain layer — names, layer catalogue, and the text-mutation engine.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
