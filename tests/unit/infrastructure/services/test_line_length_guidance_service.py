import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from line_length_linter.infrastructure.services.guidance_service import GuidanceService


class TestGuidanceService(unittest.TestCase):
    def test_loads_packaged_registry(self) -> None:
        service = GuidanceService()

        entry = service.get_entry("C9801")

        self.assertIsNotNone(entry)
        self.assertEqual(entry["symbol"], "max-line-length-exceeded")
        self.assertEqual(service.get_entry("max-line-length-exceeded"), entry)
        self.assertEqual(service.get_codes(), ["C9801"])
        self.assertIn("Wrap the line", service.get_manual_instructions("C9801"))

    def test_get_registry_returns_copy(self) -> None:
        service = GuidanceService()
        registry = service.get_registry()
        registry.clear()
        self.assertTrue(service.get_registry())

    def test_missing_registry_is_empty(self) -> None:
        service = GuidanceService(registry_path="/nonexistent/rule_registry.yaml")

        self.assertEqual(service.get_registry(), {})
        self.assertIsNone(service.get_entry("C9801"))
        self.assertEqual(service.get_manual_instructions("C9801"), "")
        self.assertEqual(service.get_codes(), [])

    def test_invalid_yaml_logs_warning(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "rule_registry.yaml"
            path.write_text("line-length.C9801: [unclosed\n", encoding="utf-8")

            with self.assertLogs(
                "line_length_linter.infrastructure.services.guidance_service", level="WARNING"
            ):
                service = GuidanceService(registry_path=str(path))

        self.assertEqual(service.get_registry(), {})

    def test_custom_registry(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "rule_registry.yaml"
            path.write_text(
                "line-length.C9801:\n  symbol: custom\n  manual_instructions: Shorten it.\n",
                encoding="utf-8",
            )
            service = GuidanceService(registry_path=str(path))

        self.assertEqual(service.get_entry("custom")["symbol"], "custom")
        self.assertEqual(service.get_manual_instructions("C9801"), "Shorten it.")
