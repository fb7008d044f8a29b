#!/usr/bin/env python3
"""
Breve CLI
Generate tokens and inspect configuration from the command line.
"""

import logging
import sys
from typing import Optional

import click
import yaml

from breve import __version__
from breve.config import BreveConfig, setup_logging
from breve.errors import BreveError
from breve.ids import uuid

logger = logging.getLogger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (default: ~/.breve/config.yaml)')
@click.version_option(version=__version__, prog_name='Breve')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_path: Optional[str]):
    """
    Breve - mixins, custom events, tokens, throttle/debounce and polyfills
    """
    config = BreveConfig.load(config_path)
    if debug:
        config = config.model_copy(update={'log_level': 'DEBUG'})
    elif verbose:
        config = config.model_copy(update={'log_level': 'INFO'})
    setup_logging(config)
    logger.debug(f"Loaded configuration: {config.to_dict()}")
    ctx.obj = config


@cli.command('uuid')
@click.option('--count', '-n', default=1, type=click.IntRange(min=1), help='Number of tokens to generate')
def uuid_command(count: int):
    """Print random tokens, one per line"""
    for _ in range(count):
        click.echo(uuid())


@cli.command('config')
@click.pass_obj
def config_command(config: BreveConfig):
    """Print the effective configuration as YAML"""
    click.echo(yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=True), nl=False)


def main():
    """Main CLI entry point"""
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except BreveError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
