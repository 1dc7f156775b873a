from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    DEBUG: bool = False

    # ===== GitHub =====
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_PER_PAGE: int = 50

    # 원격 저장소에 보관되는 catalog id (Actions variable)
    CATALOG_IDENTIFIER_VARIABLE: str = "catalogIdentifier"

    # ===== Catalog files =====
    CATALOG_FILE_NAME: str = "catalog.yml"
    MANIFEST_FILE_NAME: str = "manifest.yml"
    AUTO_GENERATED_CATALOG_DIR: str = ".githubtocatalog"
    AUTO_GENERATED_CATALOG_FILE_NAME: str = "auto-generated-catalog.yml"

    DEFAULT_DESCRIPTION: str = "No description available"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = AppSettings()
