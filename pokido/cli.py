"""Command-line interface for Pokido - scan, search and browse the album."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .album.store import AlbumStore, KeyValueAlbumPersistence
from .core.types import ResolvedCard
from .display.locale import t
from .pipeline import ScanService
from .store.kv import SqliteKeyValueStore
from .store.preferences import LanguagePreference
from .utils.config import settings
from .utils.error_handler import PokidoError
from .utils.log import configure_logging, get_logger

# Configure logging
configure_logging()
logger = get_logger(__name__)

# Rich console
console = Console()

app = typer.Typer(
    name="pokido",
    help="Pokido - identify Pokemon cards from a photo and keep an album",
    add_completion=False
)


def _kv_store() -> SqliteKeyValueStore:
    return SqliteKeyValueStore(settings.ALBUM_DB_PATH)


def _locale(lang: Optional[str], store: SqliteKeyValueStore) -> str:
    if lang in ("he", "en"):
        return lang
    return LanguagePreference(store).get()


def _print_card(resolved: ResolvedCard) -> None:
    card = resolved.card
    locale = resolved.locale

    table = Table(title=f"{card.name} #{card.local_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    set_text = card.set_name or "Unknown"
    if card.set_size:
        set_text += f" ({card.set_size} {t('cards', locale)})"
    table.add_row(t("set", locale), set_text)
    table.add_row(t("rarity", locale), f"{resolved.rarity_label} {resolved.stars}")
    table.add_row(t("hp", locale), str(card.hp) if card.hp is not None else "?")
    if resolved.type_names:
        table.add_row("Types", ", ".join(resolved.type_names))
    table.add_row(t("estimatedValue", locale), f"₪{resolved.estimated_value}")
    if card.illustrator:
        table.add_row(t("illustrator", locale), card.illustrator)
    for attack in card.attacks:
        damage = attack.get("damage")
        table.add_row(t("attacks", locale), f"{attack.get('name', '')} {damage or ''}".strip())
    if card.image_url:
        table.add_row("Image", card.image_url)

    console.print(table)
    console.print(Panel("\n".join(resolved.tips), title=t("tips", locale), border_style="yellow"))


def _save(resolved: ResolvedCard, store: SqliteKeyValueStore) -> None:
    album = AlbumStore(KeyValueAlbumPersistence(store))
    entry = album.add_card(resolved.card)
    console.print(f"[green]✓ {t('savedToAlbum', resolved.locale)}[/green] (x{entry.scan_count})")


def _fail(error: PokidoError, locale: str) -> None:
    console.print(f"[red]❌ {t(error.message_key, locale)}[/red]")
    logger.warning("Command failed", error=str(error), error_type=type(error).__name__)
    raise typer.Exit(1)


@app.command()
def scan(
    image: Path = typer.Argument(..., exists=True, dir_okay=False, help="Photo of a Pokemon card"),
    save: bool = typer.Option(False, "--save", "-s", help="Save the card to the album"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Display language: he or en"),
):
    """Identify a card from a photo: vision → catalog → display."""
    store = _kv_store()
    locale = _locale(lang, store)
    service = ScanService()

    try:
        with console.status(f"[bold green]{t('analyzing', locale)}", spinner="dots"):
            resolved = asyncio.run(service.analyze(image.read_bytes(), locale))
    except PokidoError as e:
        _fail(e, locale)

    _print_card(resolved)
    if save:
        _save(resolved, store)


@app.command()
def search(
    name: str = typer.Argument(..., help="Pokemon name"),
    number: Optional[str] = typer.Option(None, "--number", "-n", help='Printed number, e.g. "25/102"'),
    save: bool = typer.Option(False, "--save", "-s", help="Save the card to the album"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Display language: he or en"),
):
    """Look a card up by name and number, without an image."""
    store = _kv_store()
    locale = _locale(lang, store)
    service = ScanService()

    try:
        with console.status(f"[bold green]{t('loading', locale)}", spinner="dots"):
            resolved = asyncio.run(service.search(name, number, locale))
    except PokidoError as e:
        _fail(e, locale)

    _print_card(resolved)
    if save:
        _save(resolved, store)


@app.command()
def album(
    set_id: Optional[str] = typer.Argument(None, help="Show the cards of one set"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Display language: he or en"),
):
    """Show album sets with completion, or the cards of one set."""
    store = _kv_store()
    locale = _locale(lang, store)
    album_store = AlbumStore(KeyValueAlbumPersistence(store))

    if set_id:
        cards = album_store.set_cards(set_id)
        if not cards:
            console.print(f"[yellow]{t('noCardsInSet', locale)}[/yellow]")
            return
        table = Table(title=set_id)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="white")
        table.add_column(t("rarity", locale), style="magenta")
        table.add_column("Scans", justify="right")
        table.add_column("Last scan", style="dim")
        for entry in cards:
            table.add_row(entry.number, entry.name, entry.rarity or "", str(entry.scan_count), entry.last_scanned_at)
        console.print(table)
        return

    sets = album_store.sets_with_stats()
    if not sets:
        console.print(f"[yellow]{t('emptyAlbum', locale)}[/yellow] {t('scanFirst', locale)}")
        return

    table = Table(title=t("myAlbum", locale))
    table.add_column("Set", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Collected", justify="right")
    table.add_column("%", justify="right", style="green")
    for stats in sets:
        total = str(stats.total) if stats.total else "?"
        table.add_row(stats.id, stats.name, f"{stats.collected}/{total}", f"{stats.percentage}%")
    console.print(table)

    totals = album_store.total_stats()
    console.print(f"[dim]{totals.total_cards} {t('cards', locale)} / {totals.total_sets} sets[/dim]")


@app.command()
def lang(
    locale: Optional[str] = typer.Argument(None, help="he or en; omit to toggle"),
):
    """Set or toggle the saved display language."""
    preference = LanguagePreference(_kv_store())
    if locale is None:
        new = preference.toggle()
    elif preference.set(locale.lower()):
        new = locale.lower()
    else:
        console.print(f"[red]❌ Unsupported language: {locale}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓ {t('language', new)}: {t('hebrew' if new == 'he' else 'english', new)}[/green]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port"),
):
    """Run the HTTP API."""
    import uvicorn

    console.print(Panel.fit(
        f"[bold blue]Pokido API[/bold blue]\n[dim]http://{host}:{port}[/dim]",
        border_style="blue"
    ))
    uvicorn.run("pokido.api.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    app()
