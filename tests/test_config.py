from datetime import date

import pytest
import yaml

from open_prs.config import CONFIG_FILE_NAME, ConfigError, default_config_path, load_config

TODAY = date(2024, 3, 15)

VALID = {
    "api_host_url": "https://api.github.com/",
    "api_token": "xxxx",
    "search_days": 7,
    "teams": ["acme/backend", "acme/infra"],
    "user_name": "octocat",
}


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path
    return _write


class TestLoadConfig:

    def test_valid_config(self, write_config):
        config = load_config(write_config(VALID), today=TODAY)

        assert config.api_host_url == "https://api.github.com"
        assert config.api_token == "xxxx"
        assert config.search_days == 7
        assert config.user_name == "octocat"
        assert config.teams == ("acme/backend", "acme/infra")

    def test_updated_since_is_today_minus_window(self, write_config):
        config = load_config(write_config(VALID), today=TODAY)
        assert config.updated_since == "2024-03-08"

    def test_zero_day_window(self, write_config):
        config = load_config(write_config({**VALID, "search_days": 0}), today=TODAY)
        assert config.updated_since == "2024-03-15"

    def test_window_crossing_month_boundary(self, write_config):
        config = load_config(write_config({**VALID, "search_days": 20}), today=TODAY)
        assert config.updated_since == "2024-02-24"

    def test_search_days_as_string(self, write_config):
        config = load_config(write_config({**VALID, "search_days": "3"}), today=TODAY)
        assert config.search_days == 3

    @pytest.mark.parametrize("field", ["api_host_url", "search_days", "api_token", "user_name"])
    def test_missing_field_is_named(self, write_config, field):
        data = {k: v for k, v in VALID.items() if k != field}
        with pytest.raises(ConfigError, match=field):
            load_config(write_config(data), today=TODAY)

    @pytest.mark.parametrize("field", ["api_host_url", "api_token", "user_name"])
    def test_empty_field_is_named(self, write_config, field):
        with pytest.raises(ConfigError, match=field):
            load_config(write_config({**VALID, field: ""}), today=TODAY)

    @pytest.mark.parametrize("teams", [None, [], "acme/backend"])
    def test_teams_require_at_least_one(self, write_config, teams):
        data = {k: v for k, v in VALID.items() if k != "teams"}
        if teams is not None:
            data["teams"] = teams
        with pytest.raises(ConfigError, match="teams"):
            load_config(write_config(data), today=TODAY)

    @pytest.mark.parametrize("days", [-1, "soon", 1.5, True])
    def test_invalid_search_days(self, write_config, days):
        with pytest.raises(ConfigError, match="search_days"):
            load_config(write_config({**VALID, "search_days": days}), today=TODAY)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.yaml"
        with pytest.raises(ConfigError, match="Missing config file"):
            load_config(path)

    def test_unparsable_yaml(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("teams: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_empty_document_reports_first_field(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="api_host_url"):
            load_config(path)


def test_default_path_is_in_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path() == tmp_path / ".github-open-prs.yaml"


class TestConfigEdgeCases:

    def test_window_before_earliest_date(self, write_config):
        with pytest.raises(ConfigError, match="search_days"):
            load_config(write_config({**VALID, "search_days": 1000000}), today=TODAY)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_bytes(yaml.safe_dump(VALID).encode("utf-8") + b"# \xff\xfe\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(path, today=TODAY)

    @pytest.mark.parametrize("field", ["api_host_url", "api_token", "user_name"])
    def test_whitespace_only_field_is_missing(self, write_config, field):
        with pytest.raises(ConfigError, match=field):
            load_config(write_config({**VALID, field: "   "}), today=TODAY)

    def test_surrounding_whitespace_is_stripped(self, write_config):
        config = load_config(write_config({**VALID, "api_token": " xxxx \n", "user_name": " octocat"}), today=TODAY)
        assert config.api_token == "xxxx"
        assert config.user_name == "octocat"

    def test_blank_teams_are_dropped(self, write_config):
        with pytest.raises(ConfigError, match="teams"):
            load_config(write_config({**VALID, "teams": ["  ", None]}), today=TODAY)
