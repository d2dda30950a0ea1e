import unittest
import sys
import os

# Add parent directory to path to import humaniser
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from humaniser import HumanSize, UnitSystem, InvalidInputError


class TestBinarySize(unittest.TestCase):
    def test_bytes(self):
        self.assertEqual(HumanSize(500).concise(), "500 B")
        self.assertEqual(HumanSize(1023).concise(), "1023 B")
        self.assertEqual(HumanSize(0).full(), "0 bytes")
        self.assertEqual(HumanSize(1).full(), "1 byte")
        self.assertEqual(HumanSize(2).full(), "2 bytes")

    def test_kibibyte_boundary(self):
        self.assertEqual(HumanSize(1024).concise(), "1 KiB")
        self.assertEqual(HumanSize(1024).full(), "1 kibibyte")
        self.assertEqual(HumanSize(2048).full(), "2 kibibytes")

    def test_larger_units(self):
        self.assertEqual(HumanSize(1_048_576).full(), "1 mebibyte")
        self.assertEqual(HumanSize(5_242_880).concise(), "5 MiB")
        self.assertEqual(HumanSize(5_242_880).full(), "5 mebibytes")
        self.assertEqual(HumanSize(1_073_741_824).full(), "1 gibibyte")
        self.assertEqual(HumanSize(1024 ** 8).concise(), "1 YiB")

    def test_rounding(self):
        """1,500,000 / 1,048,576 = 1.4305 rounds to 1.4, not 1.5."""
        self.assertEqual(HumanSize(1_500_000).concise(), "1.4 MiB")
        self.assertEqual(HumanSize(1_500_000).full(), "1.4 mebibytes")

    def test_rounded_one_is_singular(self):
        self.assertEqual(HumanSize(1075).full(), "1 kibibyte")

    def test_rounding_up_stays_in_unit(self):
        self.assertEqual(HumanSize(1_048_525).concise(), "1024 KiB")

    def test_is_default(self):
        self.assertIs(HumanSize(1).unit_system, UnitSystem.BINARY)

    def test_monotonic_within_unit(self):
        previous = 0.0
        for value in range(1024, 1024 * 1024, 997):
            current = float(HumanSize(value).concise().split()[0])
            self.assertGreaterEqual(current, previous)
            previous = current


class TestDecimalSize(unittest.TestCase):
    def test_decimal_units(self):
        size = HumanSize(5_000_000, UnitSystem.DECIMAL)
        self.assertEqual(size.concise(), "5 MB")
        self.assertEqual(size.full(), "5 megabytes")

    def test_boundary(self):
        self.assertEqual(HumanSize.decimal(999).concise(), "999 B")
        self.assertEqual(HumanSize.decimal(1000).concise(), "1 kB")
        self.assertEqual(HumanSize.decimal(1000).full(), "1 kilobyte")

    def test_unit_system_from_string(self):
        self.assertEqual(HumanSize(2_000_000_000, "decimal").full(), "2 gigabytes")

    def test_unknown_unit_system(self):
        with self.assertRaises(InvalidInputError):
            HumanSize(1, "octal")


class TestUnitSystemSwitch(unittest.TestCase):
    def test_switch_returns_copy(self):
        binary = HumanSize(5_000_000)
        decimal = binary.as_decimal()

        self.assertEqual(decimal.concise(), "5 MB")
        self.assertEqual(binary.concise(), "4.8 MiB")
        self.assertIs(binary.unit_system, UnitSystem.BINARY)

    def test_switch_back(self):
        size = HumanSize(1024)
        self.assertEqual(size.as_decimal().as_binary(), size)
        self.assertEqual(size.as_decimal().concise(), "1 kB")

    def test_idempotent(self):
        size = HumanSize(123_456_789)
        self.assertEqual(size.concise(), size.concise())
        self.assertEqual(size.full(), size.full())


class TestSizeValidation(unittest.TestCase):
    def test_rejects_negative(self):
        with self.assertRaises(InvalidInputError):
            HumanSize(-1)

    def test_rejects_non_finite(self):
        with self.assertRaises(InvalidInputError):
            HumanSize(float("inf"))

    def test_rejects_size_too_large_for_float(self):
        with self.assertRaises(InvalidInputError):
            HumanSize(10**400)


if __name__ == '__main__':
    unittest.main()
