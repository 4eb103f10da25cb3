"""
chainboard CLI - inspect the chain registry from the terminal
"""

import asyncio
import os
import sys
from pathlib import Path

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from ..dashboard import ConfigSource, DashboardStore
from ..data.config import ConfigManager
from ..data.registry import DataRegistry

console = Console()


def setup_logging(debug: bool = False):
    logger.remove()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if debug:
        log_level = "DEBUG"
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True
    )
    log_dir = Path("logs"); log_dir.mkdir(exist_ok=True)
    logger.add(
        log_dir / "chainboard_{time:YYYY-MM-DD}.log",
        rotation="1 day",
        retention="30 days",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG"
    )


def build_store(ctx) -> DashboardStore:
    config = ConfigManager()
    local_root = ctx.obj.get('bundle')
    return DashboardStore(registry=DataRegistry(local_root=local_root, config=config), config=config)


def print_chains(store: DashboardStore, title: str):
    table = Table(title=title)
    table.add_column("Chain", style="cyan")
    table.add_column("Name")
    table.add_column("Chain ID", style="dim")
    table.add_column("Prefix")
    table.add_column("REST", justify="right")
    table.add_column("RPC", justify="right")
    table.add_column("★", justify="center")
    for name, chain in store.chains.items():
        table.add_row(
            name,
            chain.pretty_name,
            chain.chain_id or "-",
            chain.bech32_prefix,
            str(len(chain.endpoints.rest)),
            str(len(chain.endpoints.rpc)),
            "★" if store.favorites.get(name) else "",
        )
    console.print(table)


def report_status(store: DashboardStore) -> bool:
    if store.has_error:
        console.print(f"[red]Load failed: {store.last_error}[/red]")
        return False
    return True


@click.group()
@click.option('--bundle', '-b', type=click.Path(file_okay=False, path_type=Path), help='Local chain bundle directory')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, bundle, debug):
    """chainboard - Cosmos chain configuration registry"""
    ctx.ensure_object(dict)
    ctx.obj['bundle'] = bundle
    setup_logging(debug)


@cli.command()
@click.pass_context
def chains(ctx):
    """Load the bundled chain configs"""
    async def run():
        store = build_store(ctx)
        await store.initial()
        if store.price_task:
            await store.price_task
        if report_status(store):
            print_chains(store, f"{store.network_type.value} chains (local)")
            console.print(f"Active chain: [bold]{store.selector.chain_name}[/bold]")
    asyncio.run(run())


@cli.command()
@click.option('--testnet', is_flag=True, help='Use the testnet directory')
@click.pass_context
def registry(ctx, testnet):
    """Load chain configs from cosmos.directory"""
    async def run():
        store = build_store(ctx)
        store.source = ConfigSource.TESTNET_DIRECTORY if testnet else ConfigSource.MAINNET_DIRECTORY
        await store.load_from_registry()
        if report_status(store):
            print_chains(store, f"chains from {store.source.value}")
    asyncio.run(run())


@cli.command()
@click.pass_context
def favorites(ctx):
    """Show favorite chains"""
    store = build_store(ctx)
    for name, enabled in store.favorites.items():
        if enabled:
            console.print(f"★ {name}")


@cli.command()
@click.argument('chain_name')
@click.pass_context
def toggle(ctx, chain_name):
    """Flip the favorite flag of a chain"""
    store = build_store(ctx)
    state = store.toggle_favorite(chain_name)
    console.print(f"{chain_name}: {'[green]favorite[/green]' if state else '[dim]not favorite[/dim]'}")


@cli.command()
@click.pass_context
def prices(ctx):
    """Show CoinGecko prices for the bundled assets"""
    async def run():
        store = build_store(ctx)
        await store.initial()
        if not report_status(store):
            return
        if store.price_task:
            await store.price_task
        table = Table(title="Prices")
        table.add_column("Coin", style="cyan")
        for cur in ConfigManager().price_currencies:
            table.add_column(cur.upper(), justify="right")
            table.add_column("24h %", justify="right")
        for coin_id, quote in store.prices.items():
            row = [coin_id]
            for cur in ConfigManager().price_currencies:
                row.append(str(quote.get(cur, "-")))
                change = quote.get(f"{cur}_24h_change")
                row.append(f"{change:.2f}" if isinstance(change, (int, float)) else "-")
            table.add_row(*row)
        console.print(table)
    asyncio.run(run())


@cli.command()
@click.pass_context
def status(ctx):
    """Health check of the remote sources"""
    async def run():
        reg = DataRegistry(local_root=ctx.obj.get('bundle'))
        table = Table(title="Source Health")
        table.add_column("Source", style="cyan")
        table.add_column("Status")
        for source in (reg.coingecko, reg.directory):
            health = await source.health()
            table.add_row(source.name, "[green]ok[/green]" if health["ok"] else f"[red]{health.get('error')}[/red]")
        console.print(table)
    asyncio.run(run())


def main():
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
