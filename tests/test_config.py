from pathlib import Path

import pytest
from pydantic import ValidationError

from apidoc_swagger.config import ConversionConfig, load_config

FIXTURES = Path(__file__).parent / "fixtures"


class TestConversionConfig:
    def test_defaults(self):
        config = ConversionConfig()
        assert config.generate_definitions is True
        assert config.ignored_group_names == []

    def test_reserved_groups_always_ignored(self):
        assert ConversionConfig(ignored_group_names=["Login"]).ignore_groups() == [
            "login",
            "parameter",
            "request body fields",
            "header",
        ]

    def test_reserved_groups_not_repeated(self):
        groups = ConversionConfig(ignored_group_names=["Parameter"]).ignore_groups()
        assert groups.count("parameter") == 1

    def test_no_ignore_list_without_definitions(self):
        assert ConversionConfig(generate_definitions=False).ignore_groups() is None

    def test_camel_case_aliases(self):
        config = ConversionConfig(**{"generateDefinitions": False, "ignoredGroupNames": ["A"]})
        assert config.generate_definitions is False
        assert config.ignored_group_names == ["A"]

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            ConversionConfig(**{"generateDefinitons": False})


class TestLoadConfig:
    def test_load_yaml(self):
        config = load_config(FIXTURES / "config.yaml")
        assert config.ignored_group_names == ["Address"]

    def test_empty_file(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert load_config(f) == ConversionConfig()
