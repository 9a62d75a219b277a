import click
import functools
import json
import logging
import traceback
from typing import Optional

from .config import Config
from .listing import scan_listing
from .rules import Rule, Ordering, parse, compare, select_latest
from .utils import setup_logger, parse_module_levels
from .exceptions import (
    GridverError,
    ParseError,
    RuleError,
    ListingError,
    ConfigurationError,
)
from . import __version__

# same convention as the launcher's compare_versions: 0 '=', 1 '>', 2 '<'
EXIT_CODES = {
    Ordering.EQUAL: 0,
    Ordering.GREATER: 1,
    Ordering.LESS: 2,
}
SYMBOLS = {
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
    Ordering.LESS: "<",
}


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None):
    """Setup logger with debug and module-level configuration"""
    setup_logger(debug=debug, module_levels=parse_module_levels(log_levels), log_file=log_file)


def handle_errors(func):
    """Decorator to handle common exceptions"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            logging.error(f"Configuration error: {e}")
            _maybe_traceback()
            raise click.Abort()
        except (ParseError, RuleError) as e:
            logging.error(f"Version error: {e}")
            _maybe_traceback()
            raise click.Abort()
        except ListingError as e:
            logging.error(f"Listing error: {e}")
            _maybe_traceback()
            raise click.Abort()
        except GridverError as e:
            logging.error(f"An unexpected application error occurred: {e}")
            _maybe_traceback()
            raise click.Abort()
        except Exception as e:
            logging.error(f"An unexpected error occurred: {e}")
            _maybe_traceback()
            raise click.Abort()
    return wrapper


def _maybe_traceback():
    ctx = click.get_current_context(silent=True)
    if ctx is not None and ctx.find_root().obj and ctx.find_root().obj.get('debug'):
        traceback.print_exc()


def _load_config() -> Config:
    ctx = click.get_current_context()
    return Config(ctx.find_root().obj.get('config_file'))


@handle_errors
def do_parse(version_string: str) -> dict:
    """Execute parse command"""
    version = parse(version_string)
    return {
        "raw": version.raw,
        "version": version.text,
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "extra": list(version.extra),
        "prerelease": ".".join(version.prerelease),
        "build": version.build,
        "revision": version.revision,
    }


@handle_errors
def do_compare(a: str, b: str) -> Ordering:
    """Execute compare command"""
    return compare(parse(a), parse(b))


@handle_errors
def do_latest(text: str, source: Optional[str], pattern: Optional[str], rule: Optional[str]):
    """Execute latest command"""
    constraint = Rule(rule) if rule else None
    if source:
        source_conf = _load_config().source(source)
        pattern = source_conf.pattern
        if constraint is None:
            constraint = source_conf.rule()
        logging.debug(f"Using source '{source}' with pattern '{pattern}'")

    if pattern:
        candidates = scan_listing(text, pattern)
    else:
        candidates = [line.strip() for line in text.splitlines() if line.strip()]
    logging.debug(f"Scanning {len(candidates)} candidates")
    return select_latest(candidates, constraint=constraint)


@handle_errors
def do_check(version_string: str, rule_str: str) -> bool:
    """Execute check command"""
    return Rule(rule_str).matches(version_string)


@handle_errors
def do_sources() -> dict:
    """Execute sources command"""
    return _load_config().sources


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', help="Comma-separated per-module log levels (e.g., 'ver=DEBUG,conf=INFO')")
@click.option('-f', '--log-file', help='Path to log file')
@click.option('-c', '--config', 'config_file', type=click.Path(dir_okay=False), help='YAML file with extra release sources')
@click.version_option(version=__version__, prog_name='gridver')
@click.pass_context
def cli(ctx, debug, log_levels, log_file, config_file):
    """Grid Version - pick and compare browser driver / server versions

    \b
    Examples:
      gridver compare 1.10.0 1.9.0                Compare two versions
      gridver latest -s selenium index.xml        Newest selenium JAR in a listing
      gridver check "Opera 68.0.3618.63" ">12.15" Check a version against a rule
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['config_file'] = config_file
    setup_logging(debug, log_levels, log_file)


@cli.command('parse')
@click.argument('version_string')
def parse_cmd(version_string):
    """Parse the version found in VERSION_STRING and print it as JSON"""
    click.echo(json.dumps(do_parse(version_string), indent=2))


@cli.command('compare')
@click.argument('a')
@click.argument('b')
@click.pass_context
def compare_cmd(ctx, a, b):
    """Compare two versions

    \b
    Prints '<', '=' or '>' and exits with 0 ('='), 1 ('>') or 2 ('<').
    """
    result = do_compare(a, b)
    click.echo(SYMBOLS[result])
    ctx.exit(EXIT_CODES[result])


@cli.command()
@click.argument('listing', type=click.File('r'), default='-')
@click.option('-s', '--source', help='Named release source whose pattern picks candidates')
@click.option('-p', '--pattern', help='Regex that picks candidates out of the listing')
@click.option('-r', '--rule', help="Only consider versions matching this rule (e.g. '>=3.0')")
@click.option('--json', 'as_json', is_flag=True, help='Print the selected version as JSON')
def latest(listing, source, pattern, rule, as_json):
    """Print the newest version found in LISTING (file or stdin)

    \b
    Without --source or --pattern every non-empty line is a candidate.

    \b
    Examples:
      gridver latest -s selenium index.xml
      ls drivers/ | gridver latest -r '2.*'
    """
    if source and pattern:
        raise click.UsageError("--source and --pattern are mutually exclusive")
    best = do_latest(listing.read(), source, pattern, rule)
    if best is None:
        raise click.ClickException("No suitable version found")
    if as_json:
        click.echo(json.dumps({"version": best.text, "candidate": best.raw}))
    else:
        click.echo(best.text)


@cli.command()
@click.argument('version_string')
@click.argument('rule')
@click.pass_context
def check(ctx, version_string, rule):
    """Exit with 0 if VERSION_STRING satisfies RULE, 1 otherwise"""
    if do_check(version_string, rule):
        logging.info(f"'{version_string}' satisfies '{rule}'")
        ctx.exit(0)
    logging.info(f"'{version_string}' does not satisfy '{rule}'")
    ctx.exit(1)


@cli.command()
def sources():
    """List configured release sources"""
    for name, source in sorted(do_sources().items()):
        line = f"{name}: {source.pattern}"
        if source.constraint:
            line += f"  [{source.constraint}]"
        click.echo(line)

