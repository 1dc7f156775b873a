# src/catalog/catalog_yaml.py

from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "CatalogYaml",
    "CatalogYamlOwner",
    "parse_catalog_yaml",
    "dump_catalog_yaml",
]


class CatalogYamlOwner(BaseModel):
    """Owner entry of a catalog item."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None


class CatalogYaml(BaseModel):
    """
    catalog.yml / manifest.yml 내용

    Keys on disk are lower_case_with_underscores. Unknown keys are kept
    as extra fields so they survive a load/save cycle.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    id: Optional[str] = None
    # max 100 characters, no leading/trailing whitespace (catalog rule, not enforced here)
    title: Optional[str] = None
    short_description: Optional[str] = None
    type: Optional[str] = None
    documentation_url: Optional[str] = None
    source_code_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    owners: list[CatalogYamlOwner] = Field(default_factory=list)

    @field_validator("tags", "owners", mode="before")
    @classmethod
    def none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def drop_null_tags(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [tag for tag in v if tag is not None]
        return v


class CatalogTextLoader(yaml.SafeLoader):
    """SafeLoader that keeps bool/int/float/timestamp scalars as the text written in the file."""


# null 과 merge(<<) 만 유지
CatalogTextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_catalog_yaml(content: Optional[str]) -> CatalogYaml:
    """
    YAML text -> CatalogYaml

    Catalog fields keep their literal text (`id: 0123` stays "0123").
    Unknown keys keep their YAML types so they are written back unchanged.
    Empty content gives an empty catalog. Malformed YAML raises yaml.YAMLError.
    """
    text_data = yaml.load(content, Loader=CatalogTextLoader) if content else None

    if text_data is None:
        return CatalogYaml()
    if not isinstance(text_data, dict):
        raise ValueError(f"Catalog YAML must be a mapping, got {type(text_data).__name__}")

    typed_data = yaml.safe_load(content)
    # keys like `1:` and `01:` collapse when typed; then keep everything as text
    typed_values = typed_data.values() if len(typed_data) == len(text_data) else text_data.values()
    data = {
        key: value if key in CatalogYaml.model_fields else typed_value
        for (key, value), typed_value in zip(text_data.items(), typed_values)
    }
    return CatalogYaml.model_validate(data)


def dump_catalog_yaml(catalog: CatalogYaml) -> str:
    extra = catalog.model_extra or {}
    data = catalog.model_dump(exclude_none=True, exclude=set(extra))
    # unknown keys go back as loaded, null values included
    data.update(extra)
    return yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
