"""Command-line interface for tailwind-ast.

``tailwind-ast parse TOKEN...`` parses utility classes and prints the result as
a table or as JSON lines; ``tailwind-ast theme SCALE`` prints one scale of the
resolved theme.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import OUTPUT_FORMATS, ConfigError, ConfigModel, load_config
from ..parser import UtilityParser
from ..schema import AST, ParseResult
from ..theme_engine import resolve_theme

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_tokens(tokens: Tuple[str, ...]) -> List[str]:
    result: List[str] = []
    for token in tokens:
        if token == "-":
            result.extend(sys.stdin.read().split())
        else:
            result.append(token)
    return result


def _describe(result: ParseResult) -> Tuple[Text, ...]:
    if isinstance(result, AST):
        variants = ", ".join(variant.name for variant in result.variants)
        flags = " ".join(flag for flag, on in (("!", result.important), ("-", result.negative),
                                               ("[]", result.arbitrary)) if on)
        value = result.value if result.modifier is None else f"{result.value} / {result.modifier}"
        return Text(result.property), Text(value), Text(variants), Text(flags)
    hint = f" (did you mean: {', '.join(result.suggestions)})" if result.suggestions else ""
    return Text("error", style="bold red"), Text(f"{result.message}{hint}"), Text(""), Text("")


@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              help="Path to a YAML or JSON config file")
@click.option("--log-level", default=None, help="Logging level (overrides config)")
@click.pass_context
def main(ctx, config_path: Optional[Path], log_level: Optional[str]):
    """Parse utility class tokens into structured ASTs."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path) if config_path else ConfigModel()
    except ConfigError as e:
        raise click.ClickException(f"Configuration error: {e}") from e

    _configure_logging(log_level or config.log_level)
    ctx.obj["config"] = config


@main.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format (overrides config)")
@click.pass_context
def parse(ctx, tokens: Tuple[str, ...], output_format: Optional[str]):
    """Parse TOKENS (use - to read whitespace separated tokens from stdin)."""
    config: ConfigModel = ctx.obj["config"]
    try:
        parser = UtilityParser(resolve_theme(config.tailwind_config()))
    except ConfigError as e:
        raise click.ClickException(f"Configuration error: {e}") from e

    results = [(token, parser.parse(token)) for token in _read_tokens(tokens)]

    if (output_format or config.output_format) == "json":
        for token, result in results:
            click.echo(json.dumps({"input": token, **result.model_dump(mode="json", by_alias=True)}))
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Token", style="cyan", no_wrap=True)
        table.add_column("Property", style="magenta")
        table.add_column("Value")
        table.add_column("Variants", style="blue")
        table.add_column("Flags", style="dim")
        for token, result in results:
            table.add_row(Text(token), *_describe(result))
        console.print(table)

    failures = sum(1 for _, result in results if result.kind == "error")
    if failures:
        logger.info(f"{failures} of {len(results)} token(s) failed to parse")
        ctx.exit(1)


@main.command()
@click.argument("scale")
@click.pass_context
def theme(ctx, scale: str):
    """Print SCALE of the resolved theme as JSON."""
    config: ConfigModel = ctx.obj["config"]
    try:
        resolved = resolve_theme(config.tailwind_config())
    except ConfigError as e:
        raise click.ClickException(f"Configuration error: {e}") from e

    if scale not in resolved.scales:
        raise click.ClickException(
            f"Unknown scale '{scale}'. Available: {', '.join(sorted(resolved.scales))}"
        )
    # Scales are read-only mappings
    click.echo(json.dumps(resolved.scale(scale), indent=2, default=dict))


if __name__ == "__main__":
    main()
