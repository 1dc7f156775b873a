import pytest

from catalog.artifact_types import ARTIFACT_TYPES, ArtifactType, find_artifact_type, find_catalog_type


@pytest.mark.parametrize(
    "term, expected",
    [
        ("AS", "Automation"),
        ("as", "Automation"),
        ("automationscript", "Automation"),
        ("dataminer-automation-script", "Automation"),
        ("Automation Script", "Automation"),
        ("AUTOMATION", "Automation"),
        ("C", "Connector"),
        ("SC", "Scripted Connector"),
        ("scriptedconnector", "Scripted Connector"),
        ("GQIDS", "Ad Hoc Data Source"),
        ("Ad Hoc Data Source", "Ad Hoc Data Source"),
        ("Doc", "Custom Solution"),
        ("visio", "Visual Overview"),
        ("UDAPI", "User-Defined API"),
    ],
)
def test_find_catalog_type(term, expected):
    assert find_catalog_type(term) == expected


@pytest.mark.parametrize("term", ["unknownTag", "", "   ", None, "A S"])
def test_no_match_returns_none(term):
    assert find_catalog_type(term) is None
    assert find_artifact_type(term) is None


def test_first_matching_entry_wins():
    first = find_artifact_type("Automation")
    assert first is ARTIFACT_TYPES[0]
    assert "AS" in first.abbreviations


def test_is_match_checks_all_representations():
    artifact_type = ArtifactType(("X",), ("x-topic", "X Label"), "Canonical")
    assert artifact_type.is_match("x")
    assert artifact_type.is_match("X-TOPIC")
    assert artifact_type.is_match("x label")
    assert artifact_type.is_match("canonical")
    assert not artifact_type.is_match("other")


def test_entries_are_immutable():
    with pytest.raises(AttributeError):
        ARTIFACT_TYPES[0].catalog_name = "Other"
