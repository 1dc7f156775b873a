import pytest

from catalog.clean_title import CleanTitle


@pytest.mark.parametrize(
    "repo_name, expected_title, expected_type",
    [
        ("SkylineCommunications/SLC-AS-MediaOps-Apps", "MediaOps-Apps", "Automation"),
        ("SLC-AS-MediaOps-Apps", "MediaOps-Apps", "Automation"),
        ("SkylineCommunications/PCKTV-AS-RegressionTests", "RegressionTests", "Automation"),
        ("SkylineCommunications/RBM-AS-Playout", "Playout", "Automation"),
        ("SkylineCommunications/SLC-Doc-Vodafone-Deutschland-GmbH", "Vodafone-Deutschland-GmbH", "Custom Solution"),
        ("SkylineCommunications/FOXA-GQIDS-GetAppearTVData", "GetAppearTVData", "Ad Hoc Data Source"),
        ("SkylineCommunications/YLE-C-Avid-iNewsOrder-Ingest", "Avid-iNewsOrder-Ingest", "Connector"),
        ("SkylineCommunications/ngx-dwa-theme-creation-helper", "ngx-dwa-theme-creation-helper", None),
    ],
)
def test_clean_title(repo_name, expected_title, expected_type):
    ct = CleanTitle(repo_name)
    assert ct.value == expected_title
    assert ct.found_item_type == expected_type


class TestGuidelineFormat:
    def test_unknown_uppercase_code_still_strips_prefix(self):
        ct = CleanTitle("owner/SLC-XYZ-My_Tool")
        assert ct.value == "My Tool"
        assert ct.found_item_type is None

    def test_long_uppercase_code_is_not_a_type_slot(self):
        ct = CleanTitle("SLC-ABCDEFGH-Tool-X")
        assert ct.value == "SLC-ABCDEFGH-Tool-X"
        assert ct.found_item_type is None

    def test_long_prefix_disables_type_extraction(self):
        ct = CleanTitle("Company123-AS-Tool")
        assert ct.value == "Company123-AS-Tool"
        assert ct.found_item_type is None

    def test_nine_char_prefix_still_extracts(self):
        ct = CleanTitle("Company12-AS-Tool")
        assert ct.value == "Tool"
        assert ct.found_item_type == "Automation"

    def test_long_form_topic_in_type_slot(self):
        ct = CleanTitle("SLC-connector-My_Driver")
        assert ct.value == "My Driver"
        assert ct.found_item_type == "Connector"


class TestTwoSegmentsOrLess:
    @pytest.mark.parametrize(
        "repo_name, expected_title",
        [
            ("SLC-testRepo", "SLC-testRepo"),
            ("owner/SLC-AS", "SLC-AS"),
            ("owner/my_repo_", "my repo"),
            ("single", "single"),
        ],
    )
    def test_no_type_and_full_title(self, repo_name, expected_title):
        ct = CleanTitle(repo_name)
        assert ct.value == expected_title
        assert ct.found_item_type is None


def test_only_first_slash_is_stripped():
    ct = CleanTitle("owner/sub/repo_name")
    assert ct.value == "sub/repo name"
    assert ct.found_item_type is None


def test_underscores_become_spaces_and_are_trimmed():
    ct = CleanTitle("SLC-AS-_Media_Ops_")
    assert ct.value == "Media Ops"
