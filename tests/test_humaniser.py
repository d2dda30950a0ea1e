import unittest
import sys
import os

# Add parent directory to path to import humaniser
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from humaniser import (
    Humaniser,
    HumaniserConfig,
    HumanCount,
    HumanSize,
    OutputStyle,
    UnitSystem,
    InvalidInputError,
)

NOW = 1_700_000_000.0


class TestHumaniserDefaults(unittest.TestCase):
    def setUp(self):
        self.humaniser = Humaniser(clock=lambda: NOW)

    def test_size_defaults_to_binary(self):
        self.assertEqual(self.humaniser.size(5_000_000).concise(), "4.8 MiB")

    def test_size_override(self):
        size = self.humaniser.size(5_000_000, unit_system="decimal")
        self.assertIs(size.unit_system, UnitSystem.DECIMAL)
        self.assertEqual(size.concise(), "5 MB")

    def test_percent_default_decimals(self):
        self.assertEqual(self.humaniser.percent(12.3456).concise(), "12.3%")
        self.assertEqual(self.humaniser.percent(12.3456, 0).concise(), "12%")

    def test_render_uses_full_style(self):
        self.assertEqual(self.humaniser.render(HumanCount(1_500)), "1.5 thousand")
        self.assertEqual(self.humaniser.render(HumanCount(1_500), "concise"), "1.5K")

    def test_relative_time_uses_clock(self):
        relative = self.humaniser.relative_time(NOW - 172_800)
        self.assertEqual(relative.concise(), "2d ago")
        self.assertEqual(self.humaniser.relative_time(None).full(), "-")

    def test_count_and_elapsed_time(self):
        self.assertEqual(self.humaniser.count(999).concise(), "999")
        self.assertEqual(self.humaniser.elapsed_time(3661).full(), "1 hour 1 minute 1 second")


class TestHumaniserConfigured(unittest.TestCase):
    def setUp(self):
        config = HumaniserConfig.from_dict({
            "size": {"unit_system": "decimal"},
            "percent": {"decimals": 2},
            "output": {"style": "concise"},
        })
        self.humaniser = Humaniser(config, clock=lambda: NOW)

    def test_size_uses_configured_system(self):
        self.assertEqual(self.humaniser.size(5_000_000).full(), "5 megabytes")

    def test_percent_uses_configured_decimals(self):
        self.assertEqual(self.humaniser.percent(12.3456).full(), "12.35 percent")

    def test_render_uses_configured_style(self):
        self.assertEqual(self.humaniser.render(HumanSize(2048)), "2 KiB")
        self.assertEqual(
            self.humaniser.render(self.humaniser.relative_time(NOW - 120)), "2m ago"
        )
        self.assertEqual(
            self.humaniser.render(HumanCount(1_500), OutputStyle.FULL), "1.5 thousand"
        )


class TestOutputStyle(unittest.TestCase):
    def test_coerce(self):
        self.assertIs(OutputStyle.coerce("concise"), OutputStyle.CONCISE)
        self.assertIs(OutputStyle.coerce(OutputStyle.FULL), OutputStyle.FULL)

    def test_unknown_style(self):
        with self.assertRaises(InvalidInputError):
            HumanCount(1).format("verbose")


if __name__ == '__main__':
    unittest.main()
