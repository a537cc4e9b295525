from __future__ import annotations

import logging
import subprocess
import time
from typing import List, Optional

import typer

from .config import LogLevel, get_settings
from .render import format_spans, format_total
from .stopwatch import Stopwatch

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override SPANWATCH_LOG_LEVEL, e.g. DEBUG"
    ),
) -> None:
    """Measure cumulative wall-clock time across start/stop spans."""

    level = (log_level or get_settings().log_level).value
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("time")
def time_command(
    command: List[str] = typer.Argument(..., help="Command to run, after --"),
    repeat: int = typer.Option(1, "--repeat", "-r", min=1, help="Number of runs"),
    pause: float = typer.Option(
        0.0, "--pause", min=0.0, help="Seconds to wait between runs (not counted)"
    ),
    spans: bool = typer.Option(False, "--spans", help="Also list every span"),
    precision: Optional[int] = typer.Option(
        None, "--precision", min=0, help="Decimals in the printed total"
    ),
) -> None:
    """Run COMMAND REPEAT times; each run is one span of the total."""

    watch = Stopwatch()
    exit_code = 0

    for i in range(repeat):
        if i and pause:
            time.sleep(pause)
        watch.start()
        try:
            proc = subprocess.run(command)
        except FileNotFoundError:
            typer.echo(f"[spanwatch] command not found: {command[0]}", err=True)
            raise typer.Exit(code=127)
        except OSError as exc:
            typer.echo(f"[spanwatch] cannot execute {command[0]}: {exc.strerror}", err=True)
            raise typer.Exit(code=126)
        finally:
            watch.stop()
        logger.info("run %d/%d exited %d", i + 1, repeat, proc.returncode)
        if proc.returncode:
            exit_code = proc.returncode

    typer.echo(format_total(watch, precision))
    if spans:
        typer.echo(format_spans(watch, precision))

    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
