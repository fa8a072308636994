from pathlib import Path
from typing import List, Optional

import typer

from ownerfile.common import bus
from ownerfile.config import ConfigError
from ownerfile.needle import L, needle
from ownerfile.domain import DocumentError
from ownerfile.cli.factories import make_app

STDIN_MARKER = "-"


def _read_entries(entries: Optional[List[str]]) -> List[str]:
    resolved: List[str] = []
    for entry in entries or []:
        if entry == STDIN_MARKER:
            resolved.append(typer.get_text_stream("stdin").read())
        else:
            resolved.append(entry)
    return resolved


def append_command(
    entries: Optional[List[str]] = typer.Argument(
        None, help=needle.get(L.cli.option.entries.help)
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help=needle.get(L.cli.option.file.help),
    ),
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-d",
        help=needle.get(L.cli.option.dir.help),
    ),
    line: Optional[int] = typer.Option(
        None, "--line", "-l", min=0, help=needle.get(L.cli.option.line.help)
    ),
    at_cursor: Optional[bool] = typer.Option(
        None, "--at-cursor/--at-end", help=needle.get(L.cli.option.at_cursor.help)
    ),
    ignore_duplicates: Optional[bool] = typer.Option(
        None,
        "--ignore-duplicates/--keep-duplicates",
        help=needle.get(L.cli.option.ignore_duplicates.help),
    ),
    ignore_comments: Optional[bool] = typer.Option(
        None,
        "--ignore-comments/--keep-comments",
        help=needle.get(L.cli.option.ignore_comments.help),
    ),
):
    try:
        app_instance = make_app()
    except ConfigError as e:
        bus.error(L.error.config, error=str(e))
        raise typer.Exit(code=1)

    if line is not None and at_cursor is None:
        at_cursor = True

    target_dir = directory or Path.cwd()
    target = file
    candidates = _read_entries(entries)
    try:
        if target is None and candidates:
            target_dir.mkdir(parents=True, exist_ok=True)
        app_instance.run_append(
            candidates,
            target=target,
            directory=target_dir,
            cursor_line=line,
            insert_at_cursor=at_cursor,
            ignore_duplicates=ignore_duplicates,
            ignore_comments=ignore_comments,
        )
    except (DocumentError, OSError) as e:
        bus.error(L.error.document, path=target or target_dir, error=str(e))
        raise typer.Exit(code=1)
