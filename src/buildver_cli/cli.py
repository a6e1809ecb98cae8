"""Command-line interface for buildver."""

import sys
import click
from pathlib import Path

from buildver_cli.config import BuildVersionConfig
from buildver_cli.fingerprint import derive_build_id
from buildver_cli.manifest import manifest_path, read_manifest
from buildver_cli.plugins.version_module import render_version_module, virtual_module_id
from buildver_cli.propagator import BuildVersionWriter, iter_output_files
from buildver_cli.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _get_console
)
from buildver_cli.utils.helpers import atomic_write, to_posix_relative
from buildver_cli.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    console = _get_console()
    if console:
        from rich.text import Text
        from rich.panel import Panel
        version_text = Text()
        version_text.append("buildver", style="bold cyan")
        version_text.append(f" version {get_version()}", style="white")
        console.print(Panel(version_text, border_style="cyan", padding=(0, 1)))
    else:
        click.echo(f"buildver version {get_version()}")
    ctx.exit()


def _load_config(ctx, **overrides) -> BuildVersionConfig:
    """Load buildver.yml (or --config) and apply command-line overrides."""
    try:
        return BuildVersionConfig.from_yml(ctx.obj.get('config_path'), **overrides)
    except ValueError as e:
        _rich_error(f"Invalid configuration: {e}", symbol="error")
        sys.exit(1)


def _artifact_names(out_dir: Path):
    """List every regular file under out_dir as a relative POSIX path."""
    return [to_posix_relative(p, out_dir) for p in iter_output_files(out_dir)]


@click.group(help="Derive a deterministic build id from bundle output and propagate it")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help="Config file (default: ./buildver.yml)")
@click.pass_context
def cli(ctx, config_path):
    """Main entry point for the buildver CLI."""
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command(help="Print the build id for artifact names or an output directory")
@click.argument('names', nargs=-1)
@click.option('--dir', 'out_dir', type=click.Path(exists=True, file_okay=False),
              help="Use every file under this directory as the artifact set")
@click.option('--length', type=int, help="Number of hex characters in the id")
@click.pass_context
def derive(ctx, names, out_dir, length):
    """Derive the build id without writing anything."""
    config = _load_config(ctx, id_length=length)
    if out_dir and names:
        _rich_error("Pass artifact names or --dir, not both")
        sys.exit(1)

    artifact_names = _artifact_names(Path(out_dir)) if out_dir else list(names)
    click.echo(derive_build_id(artifact_names, length=config.id_length))


@cli.command(help="Print or write the early-pass version module")
@click.option('--var-name', help="Exported variable name (default: BUILD_ID)")
@click.option('--value', help="Placeholder value (default: dev)")
@click.option('--output', '-o', type=click.Path(dir_okay=False), help="Write the module to this file")
@click.pass_context
def module(ctx, var_name, value, output):
    """Render `export const <VAR> = "<value>";` for code compiled before the final pass."""
    config = _load_config(ctx, var_name=var_name, initial_value=value)
    source = render_version_module(config.var_name, config.initial_value)

    if not output:
        click.echo(source)
        return

    try:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(output_path, source + "\n")
    except OSError as e:
        _rich_error(f"Failed to write version module {output}: {e}", symbol="error")
        sys.exit(1)
    _rich_success(f"Version module for {virtual_module_id(config.var_name)} written to {output}", symbol="pencil")


@cli.command(help="Persist the build id and rewrite placeholders in a built output tree")
@click.argument('out_dir', required=False, type=click.Path(file_okay=False))
@click.option('--filename', help="Manifest file name under assets/ (default: build-version.txt)")
@click.option('--var-name', help="Placeholder variable to rewrite (default: BUILD_ID)")
@click.option('--length', type=int, help="Number of hex characters in the id")
@click.option('--no-propagate', is_flag=True, help="Only write the manifest, leave other files alone")
@click.option('--verbose', '-v', is_flag=True, help="Show every scanned file")
@click.pass_context
def write(ctx, out_dir, filename, var_name, length, no_propagate, verbose):
    """Run the final pass.

    The artifact set is every regular file under OUT_DIR, named by its path
    relative to OUT_DIR. Failures exit with status 1; files rewritten before
    the failure keep the new id.
    """
    config = _load_config(ctx, filename=filename, var_name=var_name, id_length=length, output_dir=out_dir)
    root = Path(config.output_dir)
    if not root.is_dir():
        _rich_error(f"Output directory not found: {root}", symbol="error")
        sys.exit(1)

    writer = BuildVersionWriter(
        filename=config.filename,
        var_name=config.var_name,
        id_length=config.id_length,
        propagate=not no_propagate,
        verbose=verbose,
    )
    try:
        result = writer.write(root, _artifact_names(root))
    except OSError as e:
        _rich_error(f"Failed to write build version: {e}", symbol="error")
        sys.exit(1)

    console = _get_console()
    if console:
        from rich.table import Table

        table = Table(title="Build Version Summary", show_header=True, header_style="bold cyan")
        table.add_column("Component", style="bold white", min_width=12)
        table.add_column("Value", style="cyan")
        table.add_row("Build ID", result.build_id)
        table.add_row("Manifest", str(result.manifest.path))
        if writer.propagate:
            table.add_row("Files scanned", str(result.files_scanned))
            table.add_row("Files updated", str(len(result.updated_files)))
            table.add_row("Already current", str(len(result.rewrites) - len(result.updated_files)))
        console.print(table)


@cli.command(help="Print the persisted build id of an output tree")
@click.argument('out_dir', required=False, type=click.Path(file_okay=False))
@click.option('--filename', help="Manifest file name under assets/ (default: build-version.txt)")
@click.pass_context
def show(ctx, out_dir, filename):
    """Read `<OUT_DIR>/assets/<filename>`."""
    config = _load_config(ctx, filename=filename, output_dir=out_dir)
    try:
        build_id = read_manifest(config.output_dir, config.filename)
    except OSError as e:
        _rich_error(f"Failed to read build version: {e}", symbol="error")
        sys.exit(1)

    if build_id is None:
        _rich_warning(f"No build version found at {manifest_path(config.output_dir, config.filename)}")
        _rich_info("Run 'buildver write' after the final build pass", symbol="info")
        sys.exit(1)
    click.echo(build_id)


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        _rich_error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
