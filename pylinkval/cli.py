"""Defines the command-line interface for the linkval application.

This module uses the `click` library to create the CLI and `rich` to render
its output. It exposes the URL component engine (parse, join, origin and
query commands) and the format validator catalog (check, detect and scan).
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click
from halo import Halo
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .core.config import Config
from .core.exceptions import LinkvalError
from .core.formats import FormatKind
from .core.validator import detect_formats, validate_value
from .urls import (
    is_external,
    is_secure,
    join as join_urls,
    normalize as normalize_url,
    origin_of,
    parse as parse_url,
    path_segments,
    query_params,
    same_origin,
    scheme_of,
    with_query,
)
from .utils.digest import generate_checksum, sha256_hash, verify_checksum
from .utils.text import matches_pattern

# Configure rich consoles for output and for error messages.
console = Console()
err_console = Console(stderr=True)

# Set up basic logging.
logger = logging.getLogger(__name__)

KIND_CHOICES = [kind.value for kind in FormatKind]


class AliasedGroup(click.Group):
    """A custom click Group that supports command aliases and case-insensitivity."""

    def __init__(self, *args, **kwargs):
        """Initializes the aliased group."""
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by name, checking for aliases and prefixes.

        Args:
            ctx: The click context.
            cmd_name: The command name entered by the user.

        Returns:
            The matched click command, or None.
        """
        cmd_name = cmd_name.lower()
        # Exact match
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        # Alias match
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        # Prefix match
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        """Adds an alias for a command.

        Args:
            alias: The alias to add.
            command_name: The name of the command to alias.
        """
        self._aliases[alias.lower()] = command_name.lower()


def _fail(error: Exception) -> None:
    """Prints an error in red and exits with status 1."""
    err_console.print(f"[red]{escape(str(error))}[/red]")
    sys.exit(1)


def _parse_pair(pair: str) -> Tuple[str, str]:
    """Splits a KEY=VALUE command-line argument.

    A pair without '=' yields an empty value.
    """
    key, _, value = pair.partition("=")
    return key, value


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pylinkval")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Parse, resolve and validate URLs and common identifier formats.

    linkval splits URLs into their components, resolves relative links,
    compares origins and rewrites query strings. It also checks values such
    as card numbers, IP addresses, postal codes and emails against their
    expected format.
    """
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        console.print("Use 'linkval check <value>' to validate a value, or 'linkval --help' for more commands.")


@main.command(name="parse")
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Output the components as JSON.")
def parse_command(url: str, json_output: bool) -> None:
    """Split a URL into scheme, host, port, path, query and fragment."""
    try:
        parsed = parse_url(url)
    except LinkvalError as e:
        _fail(e)

    components = {
        "scheme": parsed.scheme,
        "userinfo": parsed.userinfo,
        "host": parsed.host,
        "port": parsed.port,
        "effective_port": parsed.effective_port,
        "path": parsed.path,
        "query": parsed.query,
        "fragment": parsed.fragment,
        "origin": str(parsed.origin),
        "serialized": parsed.serialize(),
    }
    if json_output:
        click.echo(json.dumps(components, indent=2))
        return

    table = Table(title=f"Components of {escape(url)}")
    table.add_column("Component", style="cyan")
    table.add_column("Value")
    for name, value in components.items():
        table.add_row(name, "[dim]-[/dim]" if value is None else escape(str(value)))
    console.print(table)


@main.command()
@click.argument("base")
@click.argument("relative")
def join(base: str, relative: str) -> None:
    """Resolve RELATIVE against the BASE URL."""
    try:
        click.echo(join_urls(base, relative))
    except LinkvalError as e:
        _fail(e)


@main.command()
@click.argument("urls", nargs=-1, required=True)
def normalize(urls: Tuple[str, ...]) -> None:
    """Drop the fragment and one trailing slash from each URL."""
    for url in urls:
        click.echo(normalize_url(url))


@main.command()
@click.argument("url")
@click.argument("other", required=False)
def origin(url: str, other: Optional[str]) -> None:
    """Show the origin of URL, or compare it with the origin of OTHER."""
    try:
        click.echo(str(origin_of(url)))
        if other is not None:
            verdict = same_origin(url, other)
            style = "green" if verdict else "yellow"
            console.print(f"[{style}]Same origin as {escape(other)}: {verdict}[/{style}]")
    except LinkvalError as e:
        _fail(e)


@main.command()
@click.argument("url")
@click.option("--set", "pairs", multiple=True, metavar="KEY=VALUE", help="Replace the query with these pairs, in order.")
@click.option("--json", "json_output", is_flag=True, help="Output the pairs as JSON.")
def query(url: str, pairs: Tuple[str, ...], json_output: bool) -> None:
    """List the decoded query pairs of URL, or rewrite its query with --set."""
    try:
        if pairs:
            click.echo(with_query(url, [_parse_pair(pair) for pair in pairs]))
            return
        params = query_params(url)
    except LinkvalError as e:
        _fail(e)

    if json_output:
        click.echo(json.dumps(params, indent=2))
        return
    if not params:
        console.print("[yellow]The URL has no query parameters.[/yellow]")
        return

    table = Table(title="Query parameters")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in params:
        table.add_row(escape(key), escape(value))
    console.print(table)


@main.command()
@click.argument("url")
def segments(url: str) -> None:
    """List the non-empty path segments of URL."""
    try:
        for segment in path_segments(url):
            click.echo(segment)
    except LinkvalError as e:
        _fail(e)


@main.command()
@click.argument("hrefs", nargs=-1, required=True)
def links(hrefs: Tuple[str, ...]) -> None:
    """Classify links as external or internal without parsing them."""
    table = Table(title="Links")
    table.add_column("Href", style="cyan")
    table.add_column("Kind")
    table.add_column("Secure")
    table.add_column("Scheme")
    for href in hrefs:
        kind = "[magenta]external[/magenta]" if is_external(href) else "internal"
        secure = "[green]yes[/green]" if is_secure(href) else "no"
        table.add_row(escape(href), kind, secure, escape(scheme_of(href) or "-"))
    console.print(table)


@main.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--kind", "kinds", multiple=True, type=click.Choice(KIND_CHOICES), help="Only run validators for these formats.")
@click.option("--country", help="Country code for postal codes (US, CA, GB/UK or any other).")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
@click.option("--md", "md_output", is_flag=True, help="Output results in Markdown format.")
def check(values: Tuple[str, ...], kinds: Tuple[str, ...], country: Optional[str], config_path: Optional[str], json_output: bool, md_output: bool) -> None:
    """Validate one or more values against the format catalog.

    Without --kind every enabled validator runs and the table shows which
    formats accept the value. With --kind only those formats are checked,
    and the command exits with status 1 if any value is rejected.
    """
    config_obj = Config(config_path=config_path)
    selected = [FormatKind(k) for k in kinds] or None
    all_results = [validate_value(value, config_obj, kinds=selected, country=country) for value in values]

    output = "json" if json_output else "markdown" if md_output else config_obj.get("output", "table")
    if output == "json":
        click.echo(json.dumps(all_results, indent=2))
    elif output == "markdown":
        click.echo(_format_results_as_markdown(all_results))
    else:
        _display_results(all_results)

    if selected and any(not r["matches"] for r in all_results):
        sys.exit(1)


@main.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
def detect(values: Tuple[str, ...], config_path: Optional[str]) -> None:
    """Guess the format of each value."""
    config_obj = Config(config_path=config_path)
    table = Table(title="Detected formats")
    table.add_column("Value", style="cyan")
    table.add_column("Best match", style="bold")
    table.add_column("Also matches")
    for value in values:
        formats = detect_formats(value, config_obj)
        if formats:
            table.add_row(escape(value), formats[0].value, ", ".join(k.value for k in formats[1:]))
        else:
            table.add_row(escape(value), "[yellow]unknown[/yellow]", "")
    console.print(table)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--kind", type=click.Choice(KIND_CHOICES), required=True, help="The format every line should have.")
@click.option("--country", help="Country code for postal codes.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def scan(file: Path, kind: str, country: Optional[str], config_path: Optional[str], json_output: bool) -> None:
    """Validate every non-empty line of FILE as one format.

    Exits with status 1 if any line is rejected.
    """
    config_obj = Config(config_path=config_path)
    lines = [
        (number, line.strip())
        for number, line in enumerate(file.read_text(encoding="utf-8").splitlines(), start=1)
        if line.strip()
    ]
    format_kind = FormatKind(kind)

    rejected: List[Dict[str, Any]] = []
    with Halo(text=f"Scanning {file.name}...", spinner="dots", stream=sys.stderr) as spinner:
        for number, line in lines:
            spinner.text = f"Checking line {number}"
            result = validate_value(line, config_obj, kinds=[format_kind], country=country)
            if not result["matches"]:
                errors = [err for res in result["validator_results"] for err in res["errors"]]
                rejected.append({"line": number, "value": line, "errors": errors})
        if rejected:
            spinner.fail(f"{len(rejected)} of {len(lines)} line(s) rejected as {kind}")
        else:
            spinner.succeed(f"All {len(lines)} line(s) are valid {kind} values")

    if json_output:
        click.echo(json.dumps(rejected, indent=2))
    elif rejected:
        table = Table(title=f"Rejected lines in {escape(file.name)}")
        table.add_column("Line", style="magenta")
        table.add_column("Value", style="cyan")
        table.add_column("Reason")
        for entry in rejected:
            table.add_row(str(entry["line"]), escape(entry["value"]), escape("; ".join(entry["errors"])))
        console.print(table)

    if rejected:
        sys.exit(1)


@main.command(name="match")
@click.argument("text")
@click.argument("pattern")
def match_command(text: str, pattern: str) -> None:
    """Check whether a regular expression PATTERN matches TEXT."""
    try:
        matched = matches_pattern(text, pattern)
    except LinkvalError as e:
        _fail(e)
    console.print("[green]match[/green]" if matched else "[yellow]no match[/yellow]")
    if not matched:
        sys.exit(1)


@main.command()
@click.argument("text")
@click.option("--verify", "expected", help="Compare against this 8-character checksum.")
def digest(text: str, expected: Optional[str]) -> None:
    """Print the SHA-256 digest and short checksum of TEXT."""
    click.echo(f"sha256:   {sha256_hash(text)}")
    click.echo(f"checksum: {generate_checksum(text)}")
    if expected is not None:
        if verify_checksum(text, expected):
            console.print("[green]Checksum matches.[/green]")
        else:
            console.print("[red]Checksum does not match.[/red]")
            sys.exit(1)


def _format_results_as_markdown(all_results: List[Dict]) -> str:
    """Formats a list of validation results into a Markdown string.

    Args:
        all_results: A list of result dictionaries from the validation process.

    Returns:
        A Markdown-formatted string representing the results.
    """
    markdown = ""
    for results in all_results:
        markdown += f"# Validation of `{results.get('value', '')}`\n\n"
        matches = results.get("matches", [])
        markdown += f"**Matches:** {', '.join(matches) if matches else 'none'}\n\n"
        for res in results.get("validator_results", []):
            status = "valid" if res.get("valid") else "invalid"
            markdown += f"## {res['name']} ({status})\n"
            for error in res.get("errors", []):
                markdown += f"- error: {error}\n"
            for warning in res.get("warnings", []):
                markdown += f"- warning: {warning}\n"
            markdown += "\n"
        markdown += "---\n"
    return markdown


def _display_results(all_results: List[Dict]) -> None:
    """Displays validation results in a series of formatted tables.

    Args:
        all_results: A list of result dictionaries from the validation process.
    """
    for results in all_results:
        value = results.get("value", "")
        validator_results = results.get("validator_results", [])

        if not validator_results:
            console.print(f"[yellow]No validators were run for {escape(repr(value))}.[/yellow]")
            continue

        summary_table = Table(title=f"Validator Summary for {escape(repr(value))}")
        summary_table.add_column("Validator", style="cyan")
        summary_table.add_column("Category")
        summary_table.add_column("Status")
        summary_table.add_column("Details")
        for res in validator_results:
            status = "[green]Valid[/green]"
            if res.get("errors"):
                status = "[red]Invalid[/red]"
            elif res.get("warnings"):
                status = "[yellow]Warning[/yellow]"
            details = "; ".join(res.get("errors") or res.get("warnings") or [f"{k}: {v}" for k, v in res.get("info", {}).items()])
            summary_table.add_row(res["name"], res["category"], status, escape(details))
        console.print(summary_table)

    matched = sum(1 for r in all_results if r.get("matches"))
    style = "green" if matched == len(all_results) else "yellow"
    console.print(Panel(f"{matched} of {len(all_results)} value(s) matched at least one format.", style=style, title="Check Complete"))


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Manage the linkval configuration.

    This command allows you to view, set, and reset configuration values
    that are stored in the user-level configuration file.

    \b
    ACTION:
        get <key>       Get a configuration value.
        set <key> <value> Set a configuration value.
        list            List all current configuration values.
        reset           Reset the configuration to its default state.
    """
    config_obj = Config()
    if action == "list":
        console.print(Panel(json.dumps(config_obj.config, indent=2), title="Current Configuration"))
    elif action == "get":
        if not key:
            err_console.print("[red]Error: 'get' action requires a key.[/red]")
            sys.exit(1)
        click.echo(config_obj.get(key))
    elif action == "set":
        if not key or value is None:
            err_console.print("[red]Error: 'set' action requires a key and a value.[/red]")
            sys.exit(1)
        # Type casting for bools and ints
        if value.lower() in ('true', 'false'):
            processed_value: Any = value.lower() == 'true'
        elif value.isdigit():
            processed_value = int(value)
        else:
            processed_value = value
        config_obj.set(key, processed_value)
        try:
            config_obj.save_user_config()
            console.print(f"[green]'{key}' set to '{processed_value}' and saved to user config.[/green]")
        except IOError as e:
            err_console.print(f"[red]Error saving configuration: {e}[/red]")
            sys.exit(1)
    elif action == "reset":
        if config_obj.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


main.add_alias('c', 'check')
main.add_alias('p', 'parse')

if __name__ == "__main__":
    main()
