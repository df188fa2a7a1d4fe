import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from py_import_helper.config import get_config
from py_import_helper.exceptions import ConfigurationError, ImportParseError
from py_import_helper.helper import ImportHelper

console = Console()
error_console = Console(stderr=True)
app = typer.Typer(
    name='py-import-helper',
    help='Categorize, merge and format Python import statements',
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
]
PackageNameOption = Annotated[
    str | None,
    typer.Option('--package-name', '-p', help='Package whose imports are local'),
]
LocalPrefixOption = Annotated[
    list[str] | None,
    typer.Option('--local-prefix', '-l', help='Extra local module prefix'),
]


def _read_statements(source: str | None) -> list[tuple[int, str]]:
    if source is None or source == '-':
        text = sys.stdin.read()
    else:
        text = Path(source).read_text()
    return [
        (number, line)
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip() and not line.lstrip().startswith('#')
    ]


def _build_helper(
    config_path: str | None,
    package_name: str | None,
    local_prefixes: list[str] | None,
    line_length: int | None = None,
) -> ImportHelper:
    try:
        config = get_config(config_path)
    except ConfigurationError as e:
        error_console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    return ImportHelper(
        package_name=package_name or '',
        local_package_prefixes=local_prefixes or (),
        max_line_length=line_length,
        config=config,
    )


def _add_all(helper: ImportHelper, source: str | None, type_checking: bool) -> int:
    name = source if source not in (None, '-') else '<stdin>'
    add = helper.add_type_checking_import if type_checking else helper.add_import_string
    failures = 0
    for number, line in _read_statements(source):
        try:
            add(line)
        except ImportParseError as e:
            error_console.print(f'[red]Error:[/red] {name}:{number}: {escape(str(e))}')
            failures += 1
    return failures


@app.command('format')
def format_imports(
    source: Annotated[
        str | None,
        typer.Argument(help="File with one import per line ('-' for stdin)"),
    ] = None,
    type_checking: Annotated[
        str | None,
        typer.Option(
            '--type-checking', '-t', help='File with TYPE_CHECKING-only imports'
        ),
    ] = None,
    package_name: PackageNameOption = None,
    local_prefix: LocalPrefixOption = None,
    line_length: Annotated[
        int | None,
        typer.Option('--line-length', min=1, help='Maximum line length'),
    ] = None,
    skip_invalid: Annotated[
        bool,
        typer.Option('--skip-invalid', help='Ignore statements that fail to parse'),
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Merge and format import statements into a PEP 8 import block.

    Examples:
        py-import-helper format imports.txt
        py-import-helper format imports.txt -t type_only.txt -p myproject
        cat imports.txt | py-import-helper format --line-length 79
    """
    helper = _build_helper(config, package_name, local_prefix, line_length)

    try:
        failures = _add_all(helper, source, type_checking=False)
        if type_checking:
            failures += _add_all(helper, type_checking, type_checking=True)
    except OSError as e:
        error_console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    if failures and not skip_invalid:
        raise typer.Exit(1)

    for conflict in helper.conflicts:
        error_console.print(f'[yellow]Warning:[/yellow] alias conflict: {conflict}')

    # plain output so the block can be piped into a file unchanged
    typer.echo(helper.render(include_type_checking=True), nl=False)


@app.command()
def classify(
    modules: Annotated[list[str], typer.Argument(help='Dotted module paths')],
    package_name: PackageNameOption = None,
    local_prefix: LocalPrefixOption = None,
    config: ConfigOption = None,
) -> None:
    """Show the import group of each module.

    Examples:
        py-import-helper classify os pydantic myproject.models -p myproject
    """
    helper = _build_helper(config, package_name, local_prefix)
    for module in modules:
        stripped = module.lstrip('.')
        category = helper.classify_module(stripped, len(module) - len(stripped))
        console.print(f'{module}: [bold]{category.value}[/bold]')


@app.command()
def version() -> None:
    """Show the version of py-import-helper."""
    from py_import_helper import __version__

    console.print(f'py-import-helper version: {__version__}')


if __name__ == '__main__':
    app()
