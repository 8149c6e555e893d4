from __future__ import annotations

import json
import sys
from time import sleep
from typing import Callable, Dict, Optional

import typer

from .config import get_config
from .events import snapshot_dump
from .timing import Chronometer


app = typer.Typer(add_completion=False, no_args_is_help=True)

MUTATING = ("start", "pause", "lap", "reset")


def _stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def _log(msg: str) -> None:
    typer.echo(f"[chrono] {msg}", err=True)


def _show(chrono: Chronometer, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(snapshot_dump(chrono.snapshot())))
    else:
        typer.echo(str(chrono))


def _print_laps(chrono: Chronometer) -> None:
    for idx, ms in enumerate(chrono.laps_ms(), start=1):
        typer.echo(f"{idx} {ms}")


@app.command()
def session(
    json_output: Optional[bool] = typer.Option(None, "--json/--no-json", help="Print snapshots as JSON on `show`"),
    echo_state: Optional[bool] = typer.Option(
        None, "--echo-state/--no-echo-state", help="Print the debug view after each state change"
    ),
) -> None:
    """Drive one chronometer with commands read from stdin, one per line.

    Commands: start, pause, lap, reset, show, laps, debug, quit.
    """

    cfg = get_config()
    as_json = cfg.json_output if json_output is None else json_output
    echo = cfg.echo_state if echo_state is None else echo_state
    interactive = _stdin_is_tty()

    chrono = Chronometer()
    actions: Dict[str, Callable[[], None]] = {
        "start": chrono.start,
        "pause": chrono.pause,
        "lap": chrono.lap,
        "reset": chrono.reset,
        "show": lambda: _show(chrono, as_json),
        "laps": lambda: _print_laps(chrono),
        "debug": lambda: typer.echo(repr(chrono)),
    }

    while True:
        if interactive:
            typer.echo(cfg.prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            break
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in ("quit", "exit"):
            break
        action = actions.get(cmd)
        if action is None:
            _log(f"unknown command '{cmd}' (expected one of: {', '.join(actions)}, quit)")
            continue
        action()
        if echo and cmd in MUTATING:
            typer.echo(repr(chrono))


@app.command("time")
def time_cmd(
    seconds: float = typer.Argument(..., min=0.0, help="How long to run the chronometer"),
    laps: int = typer.Option(0, min=0, help="Number of evenly spaced laps to record"),
) -> None:
    """Run a chronometer for SECONDS and print the elapsed milliseconds."""

    chrono = Chronometer()
    chrono.start()
    if laps:
        for _ in range(laps):
            sleep(seconds / laps)
            chrono.lap()
    else:
        sleep(seconds)
    chrono.pause()

    typer.echo(str(chrono))
    _print_laps(chrono)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
