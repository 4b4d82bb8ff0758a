"""Command-line interface for spdx_manifest.

Provides the main entry point and subcommands for generating SPDX license
manifests and managing the resolution cache.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from spdx_manifest.cache import ProjectCache
from spdx_manifest.config import ManifestConfig, load_config
from spdx_manifest.errors import ConfigError
from spdx_manifest.generate import generate, write_document
from spdx_manifest.models import PackageDocument, ProjectModel
from spdx_manifest.reporters import MarkdownReporter, SpdxRdfReporter
from spdx_manifest.resolvers import (
    MAVEN_CENTRAL,
    LocalRepositoryResolver,
    MavenRepositoryResolver,
    WaterfallResolver,
)
from spdx_manifest.resolvers.base import BaseResolver
from spdx_manifest.scanners import get_scanner

app = typer.Typer(
    name="spdx-manifest",
    help="Generate SPDX license manifests for Maven dependency graphs.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("spdx_manifest")


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("spdx_manifest").setLevel(level)


def _build_resolver(
    repository_url: str,
    local_repository: Optional[Path],
    offline: bool,
    use_cache: bool,
) -> BaseResolver:
    """Chain the local repository, the remote repository and the cache."""
    resolvers: list[BaseResolver] = [
        LocalRepositoryResolver(local_repository) if local_repository else LocalRepositoryResolver()
    ]
    if not offline:
        resolvers.append(MavenRepositoryResolver(repository_url))

    cache = ProjectCache() if use_cache else None
    return WaterfallResolver(resolvers, cache=cache)


async def _run_gen(
    project: ProjectModel,
    config: ManifestConfig,
    resolver: BaseResolver,
) -> PackageDocument:
    """Resolve and assemble the document, closing the resolver afterwards."""
    async with resolver:
        return await generate(project, config, resolver)


@app.command()
def gen(
    pom: Annotated[
        Path,
        typer.Option(
            "--pom",
            "-p",
            help="Path to the project file (pom.xml, *.pom, dependencies.json)",
            exists=True,
            readable=True,
        ),
    ] = Path("pom.xml"),
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="TOML config file (or pyproject.toml with [tool.spdx-manifest])",
            exists=True,
            readable=True,
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory to write the SPDX document to",
        ),
    ] = None,
    scopes: Annotated[
        Optional[str],
        typer.Option(
            "--scopes",
            help="Comma-separated dependency scopes to include (default: compile,runtime)",
        ),
    ] = None,
    exclude: Annotated[
        Optional[list[str]],
        typer.Option(
            "--exclude",
            "-e",
            help="Group id prefix to exclude (repeatable)",
        ),
    ] = None,
    originator: Annotated[
        Optional[str],
        typer.Option(
            "--originator",
            help='Package originator, e.g. "Organization: Example Inc."',
        ),
    ] = None,
    download_location: Annotated[
        Optional[str],
        typer.Option(
            "--download-location",
            help="Package download location",
        ),
    ] = None,
    markdown: Annotated[
        Optional[Path],
        typer.Option(
            "--markdown",
            "-m",
            help="Also write a Markdown attribution file to this path",
        ),
    ] = None,
    repository_url: Annotated[
        str,
        typer.Option(
            "--repository-url",
            envvar="SPDX_MANIFEST_REPOSITORY",
            help="Remote Maven repository URL",
        ),
    ] = MAVEN_CENTRAL,
    local_repository: Annotated[
        Optional[Path],
        typer.Option(
            "--local-repository",
            help="Local Maven repository (default: ~/.m2/repository)",
        ),
    ] = None,
    offline: Annotated[
        bool,
        typer.Option(
            "--offline",
            help="Only use the local repository and the cache",
        ),
    ] = False,
    no_cache: Annotated[
        bool,
        typer.Option(
            "--no-cache",
            help="Do not read or write the resolution cache",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """Generate an SPDX manifest for a project's dependencies.

    Reads the project file, resolves the license of every included
    dependency and writes <project name>.rdf to the output directory.
    A failure to write the document is reported but does not fail the command.
    """
    _setup_logging(verbose)

    try:
        config = load_config(config_file).with_overrides(
            included_scopes=scopes,
            excludes=exclude or None,
            originator=originator,
            download_location=download_location,
            output_directory=output_dir,
        )
        project = get_scanner(pom).scan()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except (ValueError, OSError) as e:
        err_console.print(f"[red]Error reading {pom}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if verbose:
        console.print(
            f"[dim]Project {project.metadata.display_name}: "
            f"{len(project.dependencies)} declared dependencies[/dim]"
        )

    resolver = _build_resolver(repository_url, local_repository, offline, not no_cache)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Resolving dependency licenses...", total=None)
        document = asyncio.run(_run_gen(project, config, resolver))
        progress.update(task, completed=True)

    unknown = sum(1 for row in document.rows if not row.licenses)
    console.print(
        f"Listed [bold]{len(document.rows)}[/bold] dependencies with "
        f"[bold]{len(document.license_info_from_files)}[/bold] distinct licenses"
    )
    if unknown:
        console.print(f"[yellow]{unknown} dependencies without license information[/yellow]")

    written = write_document(document, SpdxRdfReporter(), config.output_directory)
    if written:
        console.print(f"[green]Generated:[/green] {written}")
    else:
        err_console.print("[red]Failed to write SPDX document[/red]")

    if markdown:
        written = write_document(document, MarkdownReporter(), markdown.parent, markdown.name)
        if written:
            console.print(f"[green]Generated:[/green] {written}")
        else:
            err_console.print("[red]Failed to write Markdown attribution file[/red]")


@app.command()
def cache(
    action: Annotated[
        str,
        typer.Argument(help="Cache action: 'show' or 'clear'"),
    ],
    artifact: Annotated[
        Optional[str],
        typer.Argument(help="Group id or group:artifact to clear (optional)"),
    ] = None,
) -> None:
    """Manage the project resolution cache.

    Actions:
        show  - Display cache location, entry count, and size
        clear - Clear all cached entries (or one group/artifact)
    """
    cache_instance = ProjectCache()

    if action == "show":
        info = cache_instance.info()
        console.print(f"[bold]Cache Location:[/bold] {info['path']}")
        console.print(f"[bold]Entries:[/bold] {info['count']}")
        console.print(f"[bold]Size:[/bold] {info['size_bytes'] / 1024:.1f} KB")

    elif action == "clear":
        if artifact:
            group_id, _, artifact_id = artifact.partition(":")
            cache_instance.clear(group_id=group_id, artifact_id=artifact_id or None)
            console.print(f"[green]Cleared cache for:[/green] {artifact}")
        else:
            cache_instance.clear()
            console.print("[green]Cache cleared[/green]")

    else:
        err_console.print(f"[red]Unknown action:[/red] {action}")
        err_console.print("Valid actions: show, clear")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
