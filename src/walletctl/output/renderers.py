"""Operation-specific renderers for ServiceResult.

Client output (the report, unspent listings, mempool info) is rendered as
plain text and never passed through Rich, so it reaches stdout unchanged.
Everything else is written to a Rich Console backed by StringIO.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from walletctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from walletctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult for humans.

    Plain-text renderers return their text exactly; Rich renderers return
    plain text too whenever Rich detects no terminal.
    """
    if not result.ok:
        console = create_console()
        _render_error(result, console)
        return get_output(console)

    text_renderer = _TEXT_RENDERERS.get(result.op)
    if text_renderer is not None:
        return text_renderer(result.data)

    console = create_console()
    _RICH_RENDERERS.get(result.op, _render_generic)(result, console)
    return get_output(console)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}\n"

    d = result.data
    if result.op in ("report", "balance"):
        return f"{d.get('balance', '')}\n"
    if result.op == "unspent":
        return _lines(d.get("lines", []))
    if result.op == "mempool_info":
        return str(d.get("mempool_info", ""))
    return f"OK: {result.op}\n"


def render_telemetry(result: ServiceResult) -> str:
    """Render the span tree from ``result.meta`` (verbose mode only)."""
    if not result.meta or "telemetry" not in result.meta:
        return ""
    console = create_console()
    _render_span(console, result.meta["telemetry"], indent=2)
    return get_output(console)


# ── Plain-text renderers ─────────────────────────────────────────────


def _lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def render_report(data: dict[str, Any]) -> str:
    """Lay out the wallet report exactly as the shell original printed it."""
    currency = data.get("currency", "BTC")
    parts = [
        f"\n=== Wallet: {data.get('wallet', '')} ===\n",
        f"Balance: {data.get('balance', '')} {currency}\n",
    ]
    unconfirmed = data.get("unconfirmed_balance")
    if unconfirmed is not None:
        parts.append(f"Unconfirmed balance: {unconfirmed} {currency}\n")
    parts.append("Unconfirmed transactions:\n")
    parts.append(_lines(data.get("unconfirmed_transactions", [])))
    parts.append("Mempool transactions:\n")
    parts.append(_lines(data.get("mempool_transactions", [])))
    parts.append("\n=== Mempool Info ===\n")
    parts.append(str(data.get("mempool_info", "")))
    return "".join(parts)


def _render_unspent(data: dict[str, Any]) -> str:
    return _lines(data.get("lines", []))


def _render_mempool(data: dict[str, Any]) -> str:
    return str(data.get("mempool_info", ""))


_TEXT_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "report": render_report,
    "unspent": _render_unspent,
    "mempool_info": _render_mempool,
}


# ── Rich renderers ───────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="wallet.key"), Text(str(value), style=style), sep="")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="wallet.ok"), Text(f"  {result.op}", style="wallet.op"), sep="")


def _render_balance(result: ServiceResult, console: Console) -> None:
    d = result.data
    currency = d.get("currency", "")
    _status_line(console, result)
    _field(console, "wallet", d.get("wallet", ""), "wallet.name")
    _field(console, "balance", f"{d.get('balance', '')} {currency}", "wallet.amount")
    _field(console, "unconfirmed", f"{d.get('unconfirmed_balance', '')} {currency}")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_RICH_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "balance": _render_balance,
}


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="wallet.error"),
        Text(f"  {result.op}", style="wallet.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    """Render a span and its children with color-coded timing."""
    duration = span.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span.get("children", []):
        _render_span(console, child, indent + 4)
