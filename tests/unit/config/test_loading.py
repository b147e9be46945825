"""Tests for buildtools.json loading and saving."""

import json

from mobile_buildtools.build.config.exceptions import ConfigFileParseException
from mobile_buildtools.build.config.loading import (
    config_exists,
    dump_config,
    get_config_file_path,
    get_secrets_config,
    load_config,
    save_config,
    save_default_config,
)
from mobile_buildtools.build.config.models import BuildToolsConfig, SecretsConfig
from ..base import BaseBuildTest


class TestConfigFilePath(BaseBuildTest):

    def test_directory(self):
        self.assertEqual(get_config_file_path(self.solution_dir), self.solution_dir / "buildtools.json")

    def test_file(self):
        path = self.solution_dir / "buildtools.json"
        self.assertEqual(get_config_file_path(path), path)
        self.assertEqual(get_config_file_path(str(path)), path)


class TestLoadConfig(BaseBuildTest):

    def test_missing_config_creates_default(self):
        self.assertFalse(config_exists(self.solution_dir))

        config = load_config(self.solution_dir)

        self.assertTrue(config_exists(self.solution_dir))
        self.assertEqual(config.manifests.token, "$$")
        self.assertEqual(config.manifests.variable_prefix, "Manifest_")
        self.assertFalse(config.manifests.missing_tokens_as_errors)
        self.assertEqual(config.environment.defaults, {})

    def test_default_file_uses_pascal_case(self):
        save_default_config(self.solution_dir)
        data = json.loads((self.solution_dir / "buildtools.json").read_text())
        self.assertEqual(data["Manifests"]["Token"], "$$")
        self.assertIn("Environment", data)

    def test_reads_environment_section(self):
        self.write_json(self.solution_dir / "buildtools.json", {
            "Environment": {
                "Defaults": {"Region": "us"},
                "Configuration": {"Release": {"Region": "eu"}},
            },
        })

        config = load_config(self.solution_dir)

        self.assertEqual(config.environment.defaults, {"Region": "us"})
        self.assertEqual(config.environment.configuration["Release"], {"Region": "eu"})
        self.assertIsNone(config.manifests)

    def test_non_string_environment_values(self):
        self.write_json(self.solution_dir / "buildtools.json", {
            "Environment": {
                "Defaults": {"Port": 8080, "Debug": True, "Name": None},
                "Configuration": {"Release": {"Debug": False}},
            },
        })

        config = load_config(self.solution_dir)

        self.assertEqual(config.environment.defaults, {"Port": "8080", "Debug": "true", "Name": ""})
        self.assertEqual(config.environment.configuration["Release"], {"Debug": "false"})

    def test_byte_order_mark_is_ignored(self):
        (self.solution_dir / "buildtools.json").write_bytes(b'\xef\xbb\xbf{"Manifests": {"Token": "%%"}}')
        self.assertEqual(load_config(self.solution_dir).manifests.token, "%%")

    def test_unknown_sections_survive_round_trip(self):
        self.write_json(self.solution_dir / "buildtools.json", {
            "ReleaseNotes": {"MaxDays": 7},
            "Manifests": {"Token": "%%"},
        })

        save_config(load_config(self.solution_dir), self.solution_dir)

        data = json.loads((self.solution_dir / "buildtools.json").read_text())
        self.assertEqual(data["ReleaseNotes"], {"MaxDays": 7})
        self.assertEqual(data["Manifests"]["Token"], "%%")

    def test_invalid_json(self):
        (self.solution_dir / "buildtools.json").write_text("{", encoding='utf-8')
        with self.assertRaises(ConfigFileParseException):
            load_config(self.solution_dir)

    def test_dump_config(self):
        config = BuildToolsConfig(project_secrets={"App": SecretsConfig(prefix="App_")})
        self.assertEqual(dump_config(config)["ProjectSecrets"]["App"]["Prefix"], "App_")

    def test_dump_config_keeps_unknown_sections(self):
        self.write_json(self.solution_dir / "buildtools.json", {"ReleaseNotes": {"MaxDays": 7}})
        data = dump_config(load_config(self.solution_dir))
        self.assertEqual(data["ReleaseNotes"], {"MaxDays": 7})
        self.assertNotIn("Manifests", data)


class TestGetSecretsConfig(BaseBuildTest):

    def test_from_build_tools_config(self):
        config = BuildToolsConfig(project_secrets={"App": SecretsConfig(class_name="Secrets")})
        self.assertEqual(get_secrets_config("App", self.project_dir, config).class_name, "Secrets")

    def test_unknown_project(self):
        config = BuildToolsConfig(project_secrets={"App": SecretsConfig()})
        self.assertIsNone(get_secrets_config("Other", self.project_dir, config))
        self.assertIsNone(get_secrets_config("App", self.project_dir, None))

    def test_project_file_wins(self):
        self.write_json(self.project_dir / "secrets.config.json", {"ClassName": "FromFile"})
        config = BuildToolsConfig(project_secrets={"App": SecretsConfig(class_name="FromConfig")})
        self.assertEqual(get_secrets_config("App", self.project_dir, config).class_name, "FromFile")

    def test_invalid_project_file(self):
        (self.project_dir / "secrets.config.json").write_text("[", encoding='utf-8')
        with self.assertRaises(ConfigFileParseException):
            get_secrets_config("App", self.project_dir, None)
