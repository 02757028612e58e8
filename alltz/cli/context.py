from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from alltz.core.config import Config, load_config_or_default
from alltz.core.errors import ErrorCode
from alltz.core.result import Err
from alltz.output.console import ConsoleProtocol, RichConsole, Style
from alltz.platform.paths import config_file
from alltz.time.zones import TimezoneRegistry


@dataclass(frozen=True, slots=True)
class CLIContext:
    config_path: Path
    config: Config
    registry: TimezoneRegistry
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()
    path = config_file()

    result = load_config_or_default(path)
    if isinstance(result, Err):
        console.error(result.error.message)
        if result.error.hint:
            console.print(f"hint: {result.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    config = result.value
    for warning in config.warnings:
        console.warning(f"{path}: {warning}")

    return CLIContext(
        config_path=path,
        config=config,
        registry=TimezoneRegistry(),
        console=console,
    )
