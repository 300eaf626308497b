"""Main CLI application for Genesis Alpha."""

import logging
from pathlib import Path

import click

from ..config import ENV_PREFIX, ServiceConfig
from ..crypto import (
    generate_keypair,
    keypair_from_private_key,
    load_private_key,
    pub_key_to_json,
    save_keypair,
)
from ..models import GenesisDocument
from ..registry import GenesisRegistry
from ..web import GenesisService

logger = logging.getLogger(__name__)


@click.group()
@click.option('--debug', is_flag=True, envvar=f'{ENV_PREFIX}DEBUG', help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """Genesis Alpha CLI - form a genesis file together with other validators."""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@cli.command()
@click.option('--host', default='0.0.0.0', envvar=f'{ENV_PREFIX}HOST', help='Host to bind to')
@click.option('--port', default=8080, type=int, envvar=f'{ENV_PREFIX}PORT', help='Port to bind to')
@click.option(
    '--reject-duplicate-keys',
    is_flag=True,
    envvar=f'{ENV_PREFIX}REJECT_DUPLICATE_KEYS',
    help="Refuse a validator whose key is already in the chain's validator set"
)
@click.pass_context
def serve(ctx, host, port, reject_duplicate_keys):
    """Run the web service."""
    config = ServiceConfig(
        host=host,
        port=port,
        debug=ctx.obj['debug'],
        allow_duplicate_pub_keys=not reject_duplicate_keys
    )
    registry = GenesisRegistry(allow_duplicate_pub_keys=config.allow_duplicate_pub_keys)
    GenesisService(registry, config).run()


@cli.group()
def keygen():
    """Generate validator keys."""
    pass


@keygen.command('validator')
@click.option('--output', required=True, help='Output path (without extension)')
@click.option('--name', help='Optional validator name')
def keygen_validator(output, name):
    """Generate a validator Ed25519 keypair."""
    click.echo("Generating validator keypair...")

    keypair = generate_keypair()
    private_path, public_path = save_keypair(keypair, output, name)

    click.echo(f"\n✓ Validator keys generated:")
    click.echo(f"  Private key: {private_path} (KEEP SECURE)")
    click.echo(f"  Public key:  {public_path}")
    click.echo(f"\nPubKey (paste into the validator form):")
    click.echo(pub_key_to_json(keypair.pub_key))


@keygen.command('show')
@click.option('--key', 'key_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Path to a saved validator private key')
def keygen_show(key_path):
    """Print the pub key JSON of a saved validator private key."""
    try:
        keypair = keypair_from_private_key(load_private_key(key_path))
    except ValueError as e:
        raise click.ClickException(f"Invalid private key: {e}")

    click.echo(pub_key_to_json(keypair.pub_key))
    click.echo(f"Address: {keypair.pub_key.address}")


@cli.group()
def genesis():
    """Inspect genesis files."""
    pass


@genesis.command('info')
@click.option('--genesis', 'genesis_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Path to a downloaded genesis file')
def genesis_info(genesis_path):
    """Display genesis file information."""
    try:
        genesis_doc = GenesisDocument.from_json(Path(genesis_path).read_bytes())
    except ValueError as e:
        raise click.ClickException(f"Invalid genesis file: {e}")

    total_power = sum(v.power for v in genesis_doc.validators)

    click.echo("=== Genesis Information ===\n")
    click.echo(f"Chain ID:     {genesis_doc.chain_id}")
    click.echo(f"Genesis Time: {genesis_doc.genesis_time.isoformat()}")
    click.echo(f"App Hash:     {genesis_doc.app_hash.hex().upper() or '-'}")
    click.echo(f"App State:    {'present' if genesis_doc.app_state else '-'}")
    click.echo(f"\nValidators ({len(genesis_doc.validators)}, total power {total_power}):")
    for validator in genesis_doc.validators:
        click.echo(f"  - {validator.name}: power {validator.power}, address {validator.pub_key.address}")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
