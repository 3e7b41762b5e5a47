#!filepath: termline/cli.py
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.console import Console
from rich.markup import escape

from termline import __version__, logs
from termline.adapters.json_adapter import TimelinePayload, parse_json
from termline.config import AppConfig
from termline.observability import Instrumentation
from termline.render import Options, render_timeline
from termline.utils.datetime_utils import DateTimeUtils as dt
from termline.utils.errors import DecodeError, UserInputError
from termline.utils.logger import init_logging

app = typer.Typer(help="termline: render timestamped events as a text timeline")
err_console = Console(stderr=True)

EXIT_USAGE = 2


def _read_payload(path: Optional[Path]) -> bytes:
    # 原始字节交给 parse_json，编码错误统一成 DecodeError
    if path is None or str(path) == "-":
        return sys.stdin.buffer.read()
    if not path.is_file():
        raise UserInputError(f"payload file not found: {path}")
    return path.read_bytes()


def _cli_options(width: int, margin: int, tick_every: str, time_format: str) -> Options:
    try:
        every = dt.parse_duration(tick_every) if tick_every else None
    except ValueError as e:
        raise DecodeError("--tick-every", str(e)) from e

    return Options(
        width=width,
        left_margin=margin,
        tick_every=every,
        time_format=dt.layout_to_strftime(time_format),
    )


@logs.catch("render failed", reraise=(UserInputError,))
def _render_payload(payload: TimelinePayload, options: Options, inst: Optional[Instrumentation]) -> str:
    return render_timeline(payload.events, payload.start, payload.end, options, inst)


@app.command()
def version():
    print(__version__)


@app.command()
def render(
    path: Optional[Path] = typer.Argument(None, help="payload JSON 文件；省略或 '-' 读取 stdin"),
    width: int = typer.Option(0, "--width", "-w", help="画布宽度（列）"),
    margin: int = typer.Option(0, "--margin", "-m", help="左侧留白"),
    tick_every: str = typer.Option("", "--tick-every", "-t", help="tick 间隔，如 1h / 30m"),
    time_format: str = typer.Option("", "--time-format", "-f", help="strftime 或 15:04 形式"),
    timings: bool = typer.Option(False, "--timings", help="在 stderr 输出各阶段耗时"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML 配置文件"),
):
    """
    渲染 payload 为文本时间轴

    选项优先级：命令行 > payload.options > 配置文件
    """
    try:
        cfg = AppConfig.load(str(config) if config else None)
    except (FileNotFoundError, ValidationError) as e:
        err_console.print(f"[red]config error:[/red] {escape(str(e))}")
        raise typer.Exit(code=EXIT_USAGE)

    init_logging(cfg.log)

    try:
        payload = parse_json(_read_payload(path))
        overrides = _cli_options(width, margin, tick_every, time_format)
    except UserInputError as e:
        logs.warning(f"[CLI] {e}")
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        raise typer.Exit(code=EXIT_USAGE)

    options = overrides.merged_over(payload.options).merged_over(cfg.render.to_options())
    inst = Instrumentation() if timings else None

    text = _render_payload(payload, options, inst)
    typer.echo(text, nl=False)

    if inst is not None:
        for line in inst.report_lines():
            err_console.print(escape(line))


if __name__ == "__main__":
    app()

# python -m termline.cli render examples/day.json --width 80
