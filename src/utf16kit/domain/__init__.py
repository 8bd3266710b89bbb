"""Domain layer — the UTF-16 codec and byte framing.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
