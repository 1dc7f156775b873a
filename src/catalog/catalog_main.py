import asyncio
from typing import Optional

import typer

from core.config.settings import settings
from core.containers.app_containers import AppContainer
from core.logging.logger import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="github-to-catalog-yaml",
    help="Extends or creates a catalog.yml file with data retrieved from GitHub.",
    add_completion=False,
)


async def run_catalog(
    github_token: str,
    github_repository: str,
    workspace: str,
    catalog_identifier: Optional[str] = None,
) -> str:
    container = AppContainer()
    container.config.from_dict(
        {
            "github_token": github_token,
            "github_repository": github_repository,
            "workspace": workspace,
        }
    )

    catalog_manager = container.catalog_manager()
    return await catalog_manager.process_catalog_yaml(github_repository, catalog_identifier)


@app.command()
def main(
    github_repository: str = typer.Option(..., "--github-repository", help="The github.repository or (owner/repo)."),
    workspace: str = typer.Option(..., "--workspace", help="Path to the workspace."),
    github_token: str = typer.Option(
        ..., "--github-token", envvar="GITHUB_TOKEN", help="Either a PAT or the secrets.GITHUB_TOKEN."
    ),
    catalog_identifier: Optional[str] = typer.Option(
        None,
        "--catalog-identifier",
        help="(optional) The catalog identifier. If not provided, then the provided token must be a PAT "
        "with access to Actions/Variables.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Indicates the tool should write out debug logging."),
) -> None:
    """Extends or creates a catalog.yml file with data retrieved from GitHub."""
    configure_logging(debug or settings.DEBUG)

    try:
        asyncio.run(run_catalog(github_token, github_repository, workspace, catalog_identifier))
    except Exception as e:
        logger.error(f"Exception during Process Run: {e}", exc_info=debug)
        raise typer.Exit(code=1)

    logger.info("Process completed successfully.")


if __name__ == "__main__":
    app()
