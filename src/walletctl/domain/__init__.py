"""Domain layer — pure text rules over RPC client output.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
