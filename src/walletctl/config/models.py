"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, walletctl.toml only contains
overrides.  The defaults target a testnet4 node and its ``testnet4_wallet``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- walletctl.toml sections ---


class RpcConfig(BaseModel):
    """[rpc] section — how to reach the node's command-line client."""

    model_config = {"frozen": True}

    binary: str = "bitcoin-cli"
    network: str = "testnet4"
    extra_args: tuple[str, ...] = ()


class WalletConfig(BaseModel):
    """[wallet] section."""

    model_config = {"frozen": True}

    name: str = Field(default="testnet4_wallet", min_length=1)


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    currency: str = "BTC"
    zero_balance: str = "0.00000000"
    unconfirmed_pattern: str = 'confirmations": 0'
    context_lines: int = Field(default=2, ge=0)

