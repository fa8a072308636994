from typing import Dict, Optional

import typer

from ownerfile.common.messaging import protocols
from ownerfile.needle import L, needle

LEVEL_COLORS: Dict[str, Optional[str]] = {
    "debug": typer.colors.BRIGHT_BLACK,
    "info": None,
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "error": typer.colors.RED,
}

DETAIL_INDENT = "    "


class CliRenderer(protocols.Renderer):
    """
    Terminal renderer for bus messages.

    The first line of a message is its headline, prefixed with the localized
    level label (``cli.level.<level>``) and colored by level. Any following
    lines are details, printed dimmed and indented beneath it; the duplicate
    entry warning uses this to show the file location under the entry.
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet

    def should_render(self, level: str) -> bool:
        if level == "debug":
            return self.verbose
        if level in ("info", "success"):
            return not self.quiet
        return True

    def render(self, message: str, level: str):
        if not self.should_render(level):
            return

        headline, *details = message.split("\n")
        prefix = needle.get(L.cli.level / level)
        if prefix == str(L.cli.level / level):
            prefix = ""

        typer.secho(
            f"{prefix}{headline}",
            fg=LEVEL_COLORS.get(level),
            bold=level in ("warning", "error"),
        )
        for detail in details:
            if detail:
                typer.secho(f"{DETAIL_INDENT}{detail}", dim=True)
