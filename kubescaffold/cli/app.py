"""
Aplicación CLI de kubescaffold.

Solo compone el core (resolver de recursos y carga de PROJECT) y formatea la salida.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kubescaffold import __version__
from kubescaffold.cli.config import load_env, project_file_path
from kubescaffold.core.errors import ConfigError
from kubescaffold.core.project import ProjectFile, load_project_file
from kubescaffold.core.resource import Resource, get_resource_info

app = typer.Typer(
    name="kubescaffold",
    help="kubescaffold - paquetes de API y archivo PROJECT",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


@app.callback()
def _setup():
    load_env()


def _load_or_exit(path: Path) -> ProjectFile:
    try:
        return load_project_file(path, console=console)
    except ConfigError:
        raise typer.Exit(code=1)


@app.command()
def resource(
    group: str = typer.Option(..., "--group", "-g", help="Grupo de API (ej: apps)"),
    api_version: str = typer.Option(..., "--version", "-v", help="Versión de API (ej: v1)"),
    kind: str = typer.Option(..., "--kind", "-k", help="Kind (ej: Deployment)"),
    repo: Optional[str] = typer.Option(None, "--repo", help="Import path del proyecto (por defecto: PROJECT)"),
    domain: Optional[str] = typer.Option(None, "--domain", help="Dominio del proyecto (por defecto: PROJECT)"),
    verbose: bool = typer.Option(False, "--verbose", help="Muestra la decisión del resolver"),
):
    """Muestra el paquete Go y el group.domain de un recurso"""
    if repo is None or domain is None:
        proj = _load_or_exit(project_file_path())
        if repo is None:
            repo = proj.repo or ""
        if domain is None:
            domain = proj.domain or ""

    res = Resource(group=group, version=api_version, kind=kind)
    package, group_domain = get_resource_info(res, repo, domain, console=console if verbose else None)

    table = Table(show_header=False)
    table.add_column("Campo", style="cyan")
    table.add_column("Valor", style="green")
    table.add_row("package", package)
    table.add_row("group", group_domain)
    console.print(table)


@app.command()
def project(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ruta al archivo PROJECT"),
):
    """Muestra el contenido del archivo PROJECT"""
    path = file or project_file_path()
    p = _load_or_exit(path)

    table = Table(title=str(path), show_header=True, header_style="bold cyan")
    table.add_column("Clave", style="cyan")
    table.add_column("Valor", style="green")
    for key, value in p.model_dump().items():
        if value is None:
            continue
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def version():
    """Muestra la versión de kubescaffold"""
    console.print(Panel.fit(
        "[bold cyan]kubescaffold[/bold cyan]\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


def main():
    app()
