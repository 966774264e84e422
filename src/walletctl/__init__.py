"""walletctl — wallet and mempool report over a node's RPC command-line client."""

__version__ = "0.1.0"
