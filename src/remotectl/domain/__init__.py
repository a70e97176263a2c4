"""Domain layer — devices, commands, and the remote controller.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
