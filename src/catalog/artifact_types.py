# src/catalog/artifact_types.py

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArtifactType:
    """
    Catalog type mapping row.

    abbreviations: naming-guideline tokens used in repository names (SLC-AS-...)
    aliases: GitHub topics and human readable labels
    catalog_name: canonical catalog type returned on match
    """

    abbreviations: tuple[str, ...]
    aliases: tuple[str, ...]
    catalog_name: str

    def is_match(self, term: Optional[str]) -> bool:
        if not term or not term.strip():
            return False

        needle = term.lower()
        if needle == self.catalog_name.lower():
            return True
        if any(needle == abbreviation.lower() for abbreviation in self.abbreviations):
            return True
        return any(needle == alias.lower() for alias in self.aliases)


# 순서 중요: 첫 번째 match가 반환됨
ARTIFACT_TYPES: tuple[ArtifactType, ...] = (
    ArtifactType(("AS",), ("automationscript", "dataminer-automation-script", "Automation Script"), "Automation"),
    ArtifactType(("C",), ("connector", "dataminer-connector"), "Connector"),
    ArtifactType(("CF",), ("companionfile", "dataminer-companion-file", "Companion File"), "Custom Solution"),
    ArtifactType(("CHATOPS",), ("chatopsextension", "dataminer-chatops-extension"), "ChatOps Extension"),
    ArtifactType(("D",), ("dashboard", "dataminer-dashboard"), "Dashboard"),
    ArtifactType(("DISMACRO",), ("dismacro", "dataminer-dis-macro", "DIS Macro"), "Automation"),
    ArtifactType(("DOC",), ("documentation", "dataminer-doc"), "Custom Solution"),
    ArtifactType(("F",), ("functiondefinition", "dataminer-function-definition", "Function Definition"), "Connector"),
    ArtifactType(("GQIDS",), ("gqidatasource", "dataminer-gqi-data-source", "GQI Data Source"), "Ad Hoc Data Source"),
    ArtifactType(("GQIO",), ("gqioperator", "dataminer-gqi-operator", "GQI Operator"), "Data Transformer"),
    ArtifactType(("LA",), ("lowcodeapp", "dataminer-low-code-app"), "Low-Code App"),
    ArtifactType(("LSO",), ("lifecycleserviceorchestration", "dataminer-lifecycle-service-orchestration"), "Automation"),
    ArtifactType(("PA",), ("processautomation", "dataminer-process-automation", "Process Automation"), "Automation"),
    ArtifactType(("PLS",), ("profileloadscript", "dataminer-profile-load-script", "Profile Load Script"), "Automation"),
    ArtifactType(("S",), ("solution", "dataminer-solution"), "Custom Solution"),
    ArtifactType(("SC",), ("scriptedconnector", "dataminer-scripted-connector"), "Scripted Connector"),
    ArtifactType(("T",), ("testingsolution", "dataminer-testing-solution"), "Testing Solution"),
    ArtifactType(("UDAPI",), ("userdefinedapi", "dataminer-user-defined-api"), "User-Defined API"),
    ArtifactType(("V",), ("visio", "dataminer-visio", "Visio"), "Visual Overview"),
)


def find_artifact_type(term: Optional[str]) -> Optional[ArtifactType]:
    return next((artifact_type for artifact_type in ARTIFACT_TYPES if artifact_type.is_match(term)), None)


def find_catalog_type(term: Optional[str]) -> Optional[str]:
    """
    Abbreviation, topic, label 중 하나로 catalog type 조회

    Returns:
        canonical catalog type or None if nothing matches
    """
    artifact_type = find_artifact_type(term)
    return artifact_type.catalog_name if artifact_type else None
