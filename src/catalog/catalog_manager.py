# src/catalog/catalog_manager.py

import uuid
from typing import Optional

from catalog.artifact_types import find_catalog_type
from catalog.catalog_yaml import CatalogYaml, dump_catalog_yaml, parse_catalog_yaml
from catalog.clean_title import CleanTitle
from catalog.file_system import FileSystem
from core.config.settings import settings
from core.logging.logger import get_logger
from sources.github.service import MetadataProvider

GITHUB_URL = "https://github.com"


class CatalogTypeNotFoundError(ValueError):
    """No catalog type could be inferred from the repository name or topics."""


class CatalogManager:
    """
    catalog.yml 생성/보강 use-case

    Fields already present in the workspace file always win.
    Missing fields are filled from GitHub or derived from the repository name.
    """

    def __init__(self, fs: FileSystem, service: MetadataProvider, workspace: str):
        self.fs = fs
        self.service = service
        self.workspace = workspace
        self.logger = get_logger(__name__)

    async def process_catalog_yaml(self, repo_name: str, catalog_identifier: Optional[str] = None) -> str:
        """
        1) load catalog.yml / manifest.yml (or start empty)
        2) id, short_description, tags, title, source_code_url, type
        3) save

        Args:
            repo_name: owner/repo
            catalog_identifier: optional id to use when the file has none
        Returns:
            path of the written catalog file
        """
        if repo_name is None or not repo_name.strip():
            raise ValueError("repo_name must not be empty")

        self.logger.info("Extracting Information from GitHub...")

        parsed_repo_name = CleanTitle(repo_name)
        catalog_yaml, file_path = self._load_catalog_yaml()

        await self._check_id(catalog_yaml, catalog_identifier)
        await self._check_short_description(catalog_yaml)
        await self._check_tags(catalog_yaml)
        self._check_title(catalog_yaml, parsed_repo_name)
        self._check_source_code_url(catalog_yaml, repo_name)

        # tags가 먼저 채워져 있어야 함
        self._check_type(catalog_yaml, parsed_repo_name)

        output_path = file_path or self.fs.combine(self.workspace, settings.CATALOG_FILE_NAME)
        auto_generated_path = self.fs.combine(
            self.workspace,
            settings.AUTO_GENERATED_CATALOG_DIR,
            settings.AUTO_GENERATED_CATALOG_FILE_NAME,
        )

        updated_yaml = dump_catalog_yaml(catalog_yaml)
        self._save_file(updated_yaml, output_path)
        self._save_file(updated_yaml, auto_generated_path)

        self.logger.info(f"Finished. Updated or Created file with path: {output_path}")
        return output_path

    async def _check_id(self, catalog_yaml: CatalogYaml, catalog_identifier: Optional[str]):
        self.logger.debug("Checking if ID exists, otherwise retrieve or create it...")
        if not _is_blank(catalog_yaml.id):
            return

        if not _is_blank(catalog_identifier):
            catalog_yaml.id = catalog_identifier
            self.logger.debug("Provided catalog identifier applied.")
            return

        catalog_id = await self.service.get_catalog_identifier()
        if _is_blank(catalog_id):
            self.logger.debug("Creating new ID...")
            catalog_id = str(uuid.uuid4())
            if await self.service.create_catalog_identifier(catalog_id):
                self.logger.debug("New Catalog ID created and stored in GitHub Variable.")
            else:
                self.logger.warning(
                    "New Catalog ID could not be stored in GitHub Variable. "
                    "Provide --catalog-identifier or a token with access to Actions/Variables."
                )

        catalog_yaml.id = catalog_id

    async def _check_short_description(self, catalog_yaml: CatalogYaml):
        self.logger.debug("Checking if short_description exists, otherwise retrieve the GitHub repository description...")
        if not _is_blank(catalog_yaml.short_description):
            return

        description = await self.service.get_repository_description()
        if _is_blank(description):
            description = settings.DEFAULT_DESCRIPTION

        catalog_yaml.short_description = description
        self.logger.debug(f"Description applied: {description}")

    async def _check_tags(self, catalog_yaml: CatalogYaml):
        # topics are fetched even when the file already has tags
        self.logger.debug("Checking if tags exist, extending with retrieved GitHub repository topics...")
        topics = await self.service.get_repository_topics() or []

        catalog_yaml.tags = list(dict.fromkeys([*catalog_yaml.tags, *topics]))
        if topics:
            self.logger.debug("Distinct GitHub topics found and applied.")

    def _check_title(self, catalog_yaml: CatalogYaml, parsed_repo_name: CleanTitle):
        self.logger.debug("Checking if title exists, otherwise use a cleaned-up version of the repository name...")
        if _is_blank(catalog_yaml.title):
            catalog_yaml.title = parsed_repo_name.value
            self.logger.debug(f"GitHub repository name cleaned and applied {catalog_yaml.title}.")

    def _check_source_code_url(self, catalog_yaml: CatalogYaml, repo_name: str):
        self.logger.debug("Checking if source_code_url exists, otherwise derive it from the repository name...")
        if _is_blank(catalog_yaml.source_code_url) and "/" in repo_name:
            catalog_yaml.source_code_url = f"{GITHUB_URL}/{repo_name.strip()}"
            self.logger.debug(f"Source code URL applied: {catalog_yaml.source_code_url}")

    def _check_type(self, catalog_yaml: CatalogYaml, parsed_repo_name: CleanTitle):
        self.logger.debug("Checking if type exists, otherwise infer it from repository name or topics...")
        if not _is_blank(catalog_yaml.type):
            return

        if parsed_repo_name.found_item_type:
            catalog_yaml.type = parsed_repo_name.found_item_type
            self.logger.debug(f"Item type could be inferred from repository name {catalog_yaml.type}.")
            return

        for tag in catalog_yaml.tags:
            inferred_type = find_catalog_type(tag)
            if inferred_type:
                catalog_yaml.type = inferred_type
                self.logger.debug(f"Item type could be inferred from repository topics {catalog_yaml.type}.")
                return

        raise CatalogTypeNotFoundError(
            "Could not identify Type from GitHub. "
            "Please specify the type either through naming or topic guidelines."
        )

    def _load_catalog_yaml(self) -> tuple[CatalogYaml, Optional[str]]:
        """
        catalog.yml > manifest.yml 순서로 탐색

        Returns:
            (parsed catalog, path of the file it came from or None)
        """
        self.logger.debug("Checking if user has provided a catalog.yml or manifest.yml file within the workspace root.")

        found_file = None
        for file_name in (settings.CATALOG_FILE_NAME, settings.MANIFEST_FILE_NAME):
            file_path = self.fs.combine(self.workspace, file_name)
            if self.fs.exists(file_path):
                found_file = file_path
                self.logger.debug(f"Found file at: {file_path}")
                break

        if found_file is None:
            self.logger.debug("No existing configuration file found.")
            return CatalogYaml(), None

        catalog_yaml = parse_catalog_yaml(self.fs.read_text(found_file))
        self.logger.debug("Existing configuration file parsed.")
        return catalog_yaml, found_file

    def _save_file(self, content: str, output_path: str):
        self.logger.debug(f"Serializing and saving the updated catalog file with path: {output_path}.")

        # write_text replaces the old file in one step, read-only files included
        directory = self.fs.directory_name(output_path)
        self.fs.create_directory(directory)
        self.fs.allow_writes_on_directory(directory)
        self.fs.write_text(output_path, content)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
