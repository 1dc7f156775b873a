# src/sources/github/service.py

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from github import GithubException

from core.logging.logger import get_logger
from sources.github.client import GitHubClient


class MetadataProvider(ABC):
    """
    Remote repository metadata used to fill a catalog.

    None means "no data", not an error.
    """

    @abstractmethod
    async def get_repository_description(self) -> Optional[str]: ...

    @abstractmethod
    async def get_repository_topics(self) -> Optional[list[str]]: ...

    @abstractmethod
    async def get_catalog_identifier(self) -> Optional[str]: ...

    @abstractmethod
    async def create_catalog_identifier(self, catalog_identifier: str) -> bool: ...


class GitHubService(MetadataProvider):
    """
    MetadataProvider backed by one GitHub repository.
    PyGithub is blocking, so every call runs in a worker thread.
    """

    def __init__(self, client: GitHubClient, repository: str, variable_name: str = "catalogIdentifier"):
        self.client = client
        self.repository = repository
        self.variable_name = variable_name
        self.logger = get_logger(__name__)

    async def get_repository_description(self) -> Optional[str]:
        description = await asyncio.to_thread(self.client.get_description, self.repository)
        if description is None:
            self.logger.warning(f"Repository description not found for {self.repository}")
        return description

    async def get_repository_topics(self) -> Optional[list[str]]:
        topics = await asyncio.to_thread(self.client.get_topics, self.repository)
        return list(topics) if topics is not None else None

    async def get_catalog_identifier(self) -> Optional[str]:
        """
        Actions variable(catalogIdentifier) 조회

        Returns:
            stored identifier or None if the variable was never created
        """
        return await asyncio.to_thread(self.client.get_variable, self.repository, self.variable_name)

    async def create_catalog_identifier(self, catalog_identifier: str) -> bool:
        try:
            await asyncio.to_thread(
                self.client.create_variable, self.repository, self.variable_name, catalog_identifier
            )
        except GithubException as e:
            self.logger.error(
                f"Failed to create {self.variable_name} in GitHub repository {self.repository}: {e.status}"
            )
            return False

        self.logger.info(f"Successfully created {self.variable_name} in GitHub repository.")
        return True

    async def delete_catalog_identifier(self) -> bool:
        try:
            deleted = await asyncio.to_thread(self.client.delete_variable, self.repository, self.variable_name)
        except GithubException as e:
            self.logger.error(
                f"Failed to delete {self.variable_name} in GitHub repository {self.repository}: {e.status}"
            )
            return False

        if deleted:
            self.logger.info(f"Successfully deleted {self.variable_name} in GitHub repository.")
        return deleted
