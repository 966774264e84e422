"""Infrastructure layer — the external RPC client process.

This layer depends on stdlib and third-party logging only.
It must never import from domain, services, commands, or output.
"""
