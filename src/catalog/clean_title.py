# src/catalog/clean_title.py

from typing import Optional

from catalog.artifact_types import find_catalog_type


class CleanTitle:
    """
    Repository name -> catalog title (+ inferred catalog type)

    SkylineCommunications/SLC-AS-MediaOps-Apps
        value: "MediaOps-Apps"
        found_item_type: "Automation"
    """

    def __init__(self, github_repo_name: str):
        self.found_item_type: Optional[str] = None

        # owner prefix 제거 (첫 번째 '/' 기준)
        _, separator, remainder = github_repo_name.partition("/")
        name = remainder if separator else github_repo_name

        has_guideline_format = False
        split_dash = name.split("-")
        if len(split_dash) > 2 and len(split_dash[0]) < 10:
            found_item_type = find_catalog_type(split_dash[1])

            if found_item_type is not None:
                self.found_item_type = found_item_type
                has_guideline_format = True
            elif split_dash[1].upper() == split_dash[1] and len(split_dash[1]) < 8:
                # Unknown abbreviation, but the name still follows the guideline
                has_guideline_format = True

        title = "-".join(split_dash[2:]) if has_guideline_format else name
        self.value: str = title.replace("_", " ").strip()

    def __repr__(self) -> str:
        return f"CleanTitle(value={self.value!r}, found_item_type={self.found_item_type!r})"
