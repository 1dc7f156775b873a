# src/sources/github/client.py

from typing import Optional

from github import Auth, Github, UnknownObjectException
from github.Repository import Repository

from core.logging.logger import get_logger

DEFAULT_BASE_URL = "https://api.github.com"


class GitHubClient:
    """
    Low-level GitHub API wrapper.
    Only responsible for HTTP communication.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL, per_page: int = 50):
        self.client = Github(auth=Auth.Token(token), base_url=base_url, per_page=per_page)
        self.logger = get_logger(__name__)

    def get_repository(self, full_name: str) -> Repository:
        """
        Lazy repository handle, no request until an attribute is needed

        Args:
            full_name: owner/repo
        """
        return self.client.get_repo(full_name, lazy=True)

    def get_description(self, full_name: str) -> Optional[str]:
        repo = self.client.get_repo(full_name)
        return repo.description

    def get_topics(self, full_name: str) -> list[str]:
        return self.get_repository(full_name).get_topics()

    def get_variable(self, full_name: str, variable_name: str) -> Optional[str]:
        """
        Actions repository variable 조회

        Returns:
            variable value or None if the variable does not exist
        """
        try:
            variable = self.get_repository(full_name).get_variable(variable_name)
        except UnknownObjectException:
            self.logger.debug(f"Variable {variable_name} not found for {full_name}")
            return None
        return variable.value

    def create_variable(self, full_name: str, variable_name: str, value: str) -> None:
        self.get_repository(full_name).create_variable(variable_name, value)

    def delete_variable(self, full_name: str, variable_name: str) -> bool:
        return self.get_repository(full_name).delete_variable(variable_name)
