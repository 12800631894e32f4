"""
figtok CLI.

Commands:

- build: load tokens and write CSS or JSON
- resolve: print one token's resolved value
- calc: tokenize and validate a CSS math expression
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from figtok.cli.utils import apply_overrides, configure_logging, load_config, version_callback
from figtok.core.css_math import CalcError, tokenize, validate
from figtok.core.errors import FigtokError
from figtok.core.ir import CompositionToken
from figtok.core.loader import load
from figtok.core.resolver import ReplaceMethod, Resolver
from figtok.serialize import get_serializer, write_outputs

app = typer.Typer(
    help="""figtok - design token compiler for Tokens Studio exports

Reads a token file or directory and writes CSS custom properties or JSON.
Options not given on the command line come from ./figtok.toml.
""",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """figtok CLI main callback for global options."""
    configure_logging(verbose)


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="build")
def build_command(
    entry: Path | None = typer.Option(None, "--entry", "-e", help="Token .json file or directory"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory"),
    format: str | None = typer.Option(None, "--format", "-f", help="Output format: css or json"),
    theme_scope: str | None = typer.Option(
        None, "--theme-scope", help="Theme selector: root or attribute"
    ),
    strict_names: bool | None = typer.Option(
        None,
        "--strict-names/--no-strict-names",
        help="Fail on references that match several tokens",
    ),
    clean: bool | None = typer.Option(
        None, "--clean/--no-clean", help="Remove the output directory before writing"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to figtok.toml"),
) -> None:
    """Compile tokens into CSS or JSON files."""
    try:
        config = apply_overrides(
            load_config(config_path),
            entry=entry,
            output=output,
            format=format,
            theme_scope=theme_scope,
            clean=clean,
            strict_names=strict_names,
        )
        library = load(config.build.entry, strict_names=config.resolve.strict_names)
        serializer = get_serializer(config.build.format, theme_scope=config.build.theme_scope)
        outputs = serializer.render(library, Resolver(library))
        written = write_outputs(outputs, config.build.output, clean=config.build.clean)
    except FigtokError as exc:
        raise _fail(exc) from exc

    for path in written:
        console.print(f"  [dim]wrote[/dim] {escape(str(path))}")
    console.print(
        f"[green]Built {len(written)} {serializer.format.upper()} file(s) "
        f"into {escape(str(config.build.output))}[/green]"
    )


@app.command(name="resolve")
def resolve_command(
    name: str = typer.Argument(..., help="Token name, e.g. color.brand.primary"),
    entry: Path | None = typer.Option(None, "--entry", "-e", help="Token .json file or directory"),
    theme: str | None = typer.Option(None, "--theme", "-t", help="Resolve with this theme active"),
    mode: ReplaceMethod = typer.Option(
        ReplaceMethod.STATIC_VALUES, "--mode", "-m", help="Reference substitution method"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to figtok.toml"),
) -> None:
    """Print the resolved value of one token."""
    try:
        config = apply_overrides(load_config(config_path), entry=entry)
        library = load(config.build.entry, strict_names=config.resolve.strict_names)
        token = library.find(name, theme)
        if token is None:
            console.print(f"[red]No token named {escape(name)}[/red]")
            raise typer.Exit(code=1)

        resolver = Resolver(library)
        if isinstance(token, CompositionToken):
            for prop, value in resolver.composition_values(token, mode, theme).items():
                typer.echo(f"{prop}: {value}")
        else:
            typer.echo(resolver.css_value(token, mode, theme))
    except FigtokError as exc:
        raise _fail(exc) from exc


@app.command(name="calc")
def calc_command(
    expression: str = typer.Argument(..., help='Expression, e.g. "100% - 2 * 8px"'),
) -> None:
    """Tokenize and validate a CSS math expression."""
    try:
        tokens = tokenize(expression)
        for token in tokens:
            typer.echo(f"{token.pos:>4}  {token.kind.value:<10} {token.value!r}")
        validate(tokens)
    except CalcError as exc:
        console.print(
            f"[red]{exc.kind.value}[/red]: {escape(repr(exc.fragment))} at position {exc.pos}"
        )
        raise typer.Exit(code=1) from exc

    console.print("[green]valid[/green]")


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
