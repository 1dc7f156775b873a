from dependency_injector import containers, providers

from catalog.catalog_manager import CatalogManager
from catalog.file_system import LocalFileSystem
from core.config.settings import settings
from sources.github.client import GitHubClient
from sources.github.service import GitHubService


class AppContainer(containers.DeclarativeContainer):

    # runtime values from the CLI: github_token, github_repository, workspace
    config = providers.Configuration()

    file_system = providers.Singleton(LocalFileSystem)

    github_client = providers.Singleton(
        GitHubClient,
        token=config.github_token,
        base_url=settings.GITHUB_API_URL,
        per_page=settings.GITHUB_PER_PAGE,
    )

    github_service = providers.Factory(
        GitHubService,
        client=github_client,
        repository=config.github_repository,
        variable_name=settings.CATALOG_IDENTIFIER_VARIABLE,
    )

    catalog_manager = providers.Factory(
        CatalogManager,
        fs=file_system,
        service=github_service,
        workspace=config.workspace,
    )
