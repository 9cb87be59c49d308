import unittest

from line_length_linter.domain.config import ConfigurationLoader, LineLengthConfig


class TestLineLengthConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = LineLengthConfig()
        self.assertEqual(config.max_line_length, 120)
        self.assertTrue(config.exclude_package_statements)
        self.assertTrue(config.exclude_import_statements)
        self.assertFalse(config.exclude_comment_statements)

    def test_with_overrides_ignores_none(self) -> None:
        config = LineLengthConfig().with_overrides(
            max_line_length=80,
            exclude_import_statements=None,
            exclude_comment_statements=True,
        )
        self.assertEqual(config.max_line_length, 80)
        self.assertTrue(config.exclude_import_statements)
        self.assertTrue(config.exclude_comment_statements)

    def test_with_no_overrides_returns_same_instance(self) -> None:
        config = LineLengthConfig()
        self.assertIs(config.with_overrides(max_line_length=None), config)

    def test_is_immutable(self) -> None:
        config = LineLengthConfig()
        with self.assertRaises(AttributeError):
            config.max_line_length = 10  # type: ignore[misc]


class TestConfigurationLoader(unittest.TestCase):
    def test_empty_config_gives_defaults(self) -> None:
        self.assertEqual(ConfigurationLoader({}).to_line_length_config(), LineLengthConfig())

    def test_reads_snake_and_kebab_case_keys(self) -> None:
        loader = ConfigurationLoader({
            "max-line-length": 100,
            "exclude_comment_statements": True,
            "exclude-import-statements": False,
        })
        self.assertEqual(
            loader.to_line_length_config(),
            LineLengthConfig(
                max_line_length=100,
                exclude_package_statements=True,
                exclude_import_statements=False,
                exclude_comment_statements=True,
            ),
        )

    def test_invalid_length_warns_and_keeps_default(self) -> None:
        for raw in (0, -5, "eighty", True):
            with self.subTest(raw=raw):
                with self.assertLogs("line_length_linter.domain.config", level="WARNING") as logs:
                    loader = ConfigurationLoader({"max_line_length": raw})
                self.assertEqual(loader.max_line_length, 120)
                self.assertIn("max_line_length", logs.output[0])

    def test_invalid_flag_warns_and_keeps_default(self) -> None:
        with self.assertLogs("line_length_linter.domain.config", level="WARNING"):
            loader = ConfigurationLoader({"exclude_import_statements": "no"})
        self.assertTrue(loader.exclude_import_statements)

    def test_unknown_option_warns(self) -> None:
        with self.assertLogs("line_length_linter.domain.config", level="WARNING") as logs:
            ConfigurationLoader({"max_lenght": 80})
        self.assertIn("max_lenght", logs.output[0])
