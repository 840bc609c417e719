"""
Command-line interface for animator wrapper generation.

Reads an exported controller dump, generates the C# wrapper and prints
it or writes it to a file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    AccessModifier,
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    generate_from_dump,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .utils import DumpLoadError, load_dump

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="animator-wrapper",
        description="Generate a typed C# wrapper from an animator controller dump",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  animator-wrapper Player.json
  animator-wrapper Player.json --namespace Game --class-name PlayerAnimator -o PlayerAnimator.cs
  animator-wrapper --url https://example.com/Player.json --partial --visibility internal
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="Controller dump (JSON) to read")
    input_group.add_argument("--url", help="URL to fetch the controller dump from")

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument("--namespace", dest="namespace_name", help="Namespace to wrap the class in")
    gen_group.add_argument(
        "--class-name", help="Class name (default: the controller's name)"
    )
    gen_group.add_argument(
        "--visibility",
        choices=[m.value for m in AccessModifier],
        help="Visibility of generated members (default: public)",
    )
    gen_group.add_argument(
        "--partial",
        action="store_true",
        default=None,
        help="Generate a partial class without a base type",
    )
    gen_group.add_argument(
        "--strict-names",
        action="store_true",
        default=None,
        help="Fail when two parameters map to the same member name",
    )
    gen_group.add_argument(
        "--template-dir", help="Directory with template overrides (banner.cs.j2)"
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.namespace_name:
        overrides["namespace_name"] = args.namespace_name
    if args.class_name:
        overrides["class_name"] = args.class_name
    if args.visibility:
        overrides["visibility"] = args.visibility
    if args.partial:
        overrides["is_partial"] = True
    if args.strict_names:
        overrides["strict_names"] = True
    if args.template_dir:
        overrides["template_dir"] = args.template_dir
    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_input(args: argparse.Namespace):
    try:
        if args.file:
            return load_dump(file_path=args.file)
        return load_dump(url=args.url)
    except DumpLoadError as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _print_result(result: GenerationResult, config: GeneratorConfig, verbose: bool) -> int:
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(f"[green]✓[/green] Wrapper saved to [cyan]{output_path}[/cyan]")
        logger.info("Wrote wrapper to %s", output_path)
    else:
        console.print(
            Panel(
                Syntax(result.code, "csharp", theme="monokai"),
                title=f"📄 {result.metadata.get('class_name')}{result.metadata.get('file_extension', '')}",
                border_style="green",
            )
        )

    if verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
    except (ValueError, OSError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    try:
        config = build_config(args)
        data = _load_input(args)
        result = generate_from_dump(data, config)
        return _print_result(result, config, args.verbose)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
