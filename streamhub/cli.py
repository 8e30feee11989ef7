# streamhub/cli.py
"""
Command-line interface for streamhub.

Inspects the service catalog and reads or changes the selected backend in
the preferences file configured under `preferences.path`.
"""
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from streamhub.initializer import ServiceInitializer
from streamhub.lookups import get_cache_expiration, is_experimental
from streamhub.registry import ServiceRegistry, default_registry
from streamhub.selection import SelectionResolver
from streamhub.store import JsonFilePreferenceStore
from streamhub.utils.config import get_config
from streamhub.utils.logger import setup_logger

app = typer.Typer(
    name="streamhub",
    help="Inspect backends and manage the selected service.",
    add_completion=False,
)
console = Console()
logger = setup_logger(__name__)


def _open_store() -> JsonFilePreferenceStore:
    return JsonFilePreferenceStore(get_config()["preferences"]["path"])


def _build() -> Tuple[JsonFilePreferenceStore, ServiceRegistry]:
    return _open_store(), default_registry()


@app.command(name="services")
def list_services() -> None:
    """
    Lists every registered backend.
    """
    _, registry = _build()
    table = Table(title="Services")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Experimental")
    table.add_column("Cache TTL")
    for service in registry.services():
        table.add_row(
            str(service.service_id),
            service.name,
            "yes" if is_experimental(service.name) else "no",
            str(get_cache_expiration(service.service_id)),
        )
    console.print(table)


@app.command(name="selected")
def show_selected() -> None:
    """
    Prints the currently selected backend.
    """
    store, registry = _build()
    service_id = SelectionResolver(store, registry).get_selected_service_id()
    console.print(f"{service_id} {registry.resolve_by_id(service_id)}")


@app.command(name="select")
def select(
    service: Annotated[str, typer.Argument(help="Service id or name.")],
) -> None:
    """
    Selects a backend. Unknown services select the fallback instead.
    """
    store, registry = _build()
    resolver = SelectionResolver(store, registry)
    resolver.set_selected_service_id(int(service) if service.isdigit() else service)
    service_id = resolver.get_selected_service_id()
    console.print(
        f"Selected [bold cyan]{registry.resolve_by_id(service_id)}[/bold cyan] ({service_id})"
    )


@app.command(name="init")
def init(
    service_id: Annotated[
        Optional[int],
        typer.Option("--service", "-s", help="Only initialize this service id."),
    ] = None,
) -> None:
    """
    Applies stored credentials and prints the resulting runtime configuration.
    """
    store, registry = _build()
    initializer = ServiceInitializer(store, registry)
    if service_id is None:
        initializer.init_services()
        targets = registry.all_services()
    else:
        initializer.init_service(service_id)
        targets = [service_id] if service_id in registry else []
    logger.debug("Initialized %d service(s) from %s", len(targets), store.path)

    table = Table(title="Runtime configuration")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Instance")
    table.add_column("Auth token")
    for target in targets:
        runtime = registry.get(target)
        instance = (
            f"{runtime.instance.name} ({runtime.instance.url})" if runtime.instance else "-"
        )
        table.add_row(
            str(runtime.service_id),
            runtime.name,
            instance,
            "set" if runtime.auth_token else "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
