"""Output mode dispatch.

The CLI renders ServiceResult for humans (plain report text, Rich fields)
or machines (--json).  The formatter layer picks the mode.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from walletctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from walletctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet.  The returned text is meant to be
    written as-is; JSON output gets a terminating newline.  JSON is ASCII:
    bytes the client printed that are not valid text appear as
    ``\\udcXX`` escapes.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return json.dumps(result.model_dump(), indent=2) + "\n"
    if settings.quiet:
        return render_quiet(result)
    return render_result(result)
