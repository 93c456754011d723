"""Tests for the unit conversion engine."""

import unittest

from convert_it.converter import (
    CATEGORY_TABLE,
    conversion_table,
    convert,
    convert_linear,
    convert_temperature,
    default_units,
    display_result,
    format_conversion,
    format_value,
    get_category,
    try_convert,
    units_for,
)
from convert_it.models import Conversion

LINEAR_CATEGORIES = ["Length", "Time", "Volume"]


class TestKnownConversions(unittest.TestCase):
    def test_meters_to_kilometers(self):
        self.assertEqual(convert("Length", 1000, "Meters", "Kilometers"), 1.0)

    def test_seconds_to_hours(self):
        self.assertEqual(convert("Time", 3600, "Seconds", "Hours"), 1.0)

    def test_gallons_to_milliliters(self):
        self.assertAlmostEqual(convert("Volume", 1, "Gallons", "Milliliters"), 3785.41)

    def test_miles_to_feet(self):
        # 1609.34 / 0.3048 = 5280.0131...
        self.assertAlmostEqual(convert("Length", 1, "Miles", "Feet"), 5280.013, places=3)

    def test_days_to_minutes(self):
        self.assertAlmostEqual(convert("Time", 2, "Days", "Minutes"), 2880)

    def test_cups_to_pints(self):
        self.assertAlmostEqual(convert("Volume", 2, "Cups", "Pints"), 1.0)


class TestTemperature(unittest.TestCase):
    def test_freezing_celsius_to_fahrenheit(self):
        self.assertEqual(convert("Temp", 0, "Celcius", "Fahrenheit"), 32.0)

    def test_boiling_fahrenheit_to_celsius(self):
        self.assertEqual(convert("Temp", 212, "Fahrenheit", "Celcius"), 100.0)

    def test_celsius_to_kelvin(self):
        self.assertEqual(convert("Temp", 100, "Celcius", "Kelvin"), 373.15)

    def test_kelvin_to_fahrenheit(self):
        # 0 K = -273.15 C = -459.67 F
        self.assertAlmostEqual(convert("Temp", 0, "Kelvin", "Fahrenheit"), -459.67)

    def test_minus_forty_is_the_same_in_both_scales(self):
        self.assertAlmostEqual(convert_temperature(-40, "Celcius", "Fahrenheit"), -40)
        self.assertAlmostEqual(convert_temperature(-40, "Fahrenheit", "Celcius"), -40)

    def test_unknown_source_unit(self):
        self.assertEqual(convert_temperature(10, "Rankine", "Celcius"), 0.0)

    def test_unknown_target_unit(self):
        self.assertEqual(convert_temperature(10, "Celcius", "Rankine"), 0.0)

    def test_temperature_is_not_in_linear_table(self):
        # An offset can't be expressed as a factor
        self.assertEqual(convert_linear("Temp", 10, "Celcius", "Fahrenheit"), 0.0)


class TestFallback(unittest.TestCase):
    def test_unknown_target_unit(self):
        self.assertEqual(convert("Length", 5, "Meters", "Lightyears"), 0.0)

    def test_unknown_source_unit(self):
        self.assertEqual(convert("Time", 5, "Fortnights", "Days"), 0.0)

    def test_unknown_category(self):
        self.assertEqual(convert("Mass", 5, "Grams", "Kilograms"), 0.0)

    def test_unit_from_another_category(self):
        self.assertEqual(convert("Length", 5, "Liters", "Meters"), 0.0)
        self.assertEqual(convert("Temp", 5, "Meters", "Kelvin"), 0.0)

    def test_try_convert_distinguishes_invalid_from_zero(self):
        self.assertIsNone(try_convert("Length", 5, "Meters", "Lightyears"))
        self.assertIsNone(try_convert("Mass", 5, "Grams", "Kilograms"))
        self.assertEqual(try_convert("Length", 0, "Meters", "Feet"), 0.0)

    def test_try_convert_valid(self):
        self.assertEqual(try_convert("Length", 1000, "Meters", "Kilometers"), 1.0)


class TestProperties(unittest.TestCase):
    values = [0, 1, -3.5, 42, 1e6, 0.001]

    def test_identity(self):
        for category in CATEGORY_TABLE:
            for unit in units_for(category):
                for v in self.values:
                    self.assertAlmostEqual(
                        convert(category, v, unit, unit), v, places=6,
                        msg=f"{category} {unit} {v}",
                    )

    def test_round_trip(self):
        for category in LINEAR_CATEGORIES:
            for a in units_for(category):
                for b in units_for(category):
                    for v in self.values:
                        there = convert(category, v, a, b)
                        back = convert(category, there, b, a)
                        self.assertAlmostEqual(back, v, places=6, msg=f"{category} {a}->{b}")

    def test_scale_linear(self):
        for category in LINEAR_CATEGORIES:
            units = units_for(category)
            for a in units:
                for b in units:
                    for k in (2, -1, 0.5, 10):
                        expected = k * convert(category, 7.25, a, b)
                        self.assertAlmostEqual(
                            convert(category, k * 7.25, a, b), expected, places=6,
                        )


class TestTableLookups(unittest.TestCase):
    def test_units_in_display_order(self):
        self.assertEqual(units_for("Temp"), ["Celcius", "Fahrenheit", "Kelvin"])
        self.assertEqual(units_for("Time"), ["Seconds", "Minutes", "Hours", "Days"])

    def test_get_category(self):
        self.assertEqual(get_category("Temp").kind, "affine")
        self.assertEqual(get_category("Volume").base_unit, "Milliliters")
        self.assertIsNone(get_category("Mass"))

    def test_temperature_units_match_affine_routine(self):
        for source in units_for("Temp"):
            for target in units_for("Temp"):
                self.assertNotEqual(convert_temperature(1, source, target), 0.0)

    def test_units_for_unknown_category(self):
        self.assertEqual(units_for("Mass"), [])

    def test_default_units(self):
        self.assertEqual(default_units("Temp"), ("Celcius", "Fahrenheit"))
        self.assertEqual(default_units("Time"), ("Minutes", "Hours"))
        self.assertIsNone(default_units("Mass"))

    def test_every_category_has_a_base_unit_with_factor_one(self):
        for category in LINEAR_CATEGORIES:
            found = CATEGORY_TABLE[category]
            self.assertEqual(found.factors[found.base_unit], 1.0)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            CATEGORY_TABLE["Mass"] = None
        with self.assertRaises(TypeError):
            CATEGORY_TABLE["Length"].factors["Meters"] = 2.0


class TestDisplay(unittest.TestCase):
    def test_same_unit_shows_input(self):
        self.assertEqual(display_result("Temp", 21.5, "Kelvin", "Kelvin"), 21.5)

    def test_different_units_convert(self):
        self.assertEqual(display_result("Length", 1000, "Meters", "Kilometers"), 1.0)

    def test_conversion_table(self):
        rows = dict(conversion_table("Time", 1, "Hours"))
        self.assertEqual(list(rows), ["Seconds", "Minutes", "Hours", "Days"])
        self.assertAlmostEqual(rows["Seconds"], 3600)
        self.assertAlmostEqual(rows["Minutes"], 60)
        self.assertEqual(rows["Hours"], 1)
        self.assertAlmostEqual(rows["Days"], 1 / 24)

    def test_conversion_table_unknown_category(self):
        self.assertEqual(conversion_table("Mass", 1, "Grams"), [])

    def test_format_value(self):
        self.assertEqual(format_value(1000.0), "1,000")
        self.assertEqual(format_value(3785.41), "3,785.41")
        self.assertEqual(format_value(1 / 3), "0.333")
        self.assertEqual(format_value(0.1 + 0.2), "0.3")
        self.assertEqual(format_value(-40.0), "-40")
        self.assertEqual(format_value(0.0), "0")

    def test_format_value_negative_zero(self):
        self.assertEqual(format_value(-0.0001), "0")

    def test_format_conversion(self):
        conversion = Conversion("Length", 1000, "Meters", "Kilometers", 1.0)
        self.assertEqual(format_conversion(conversion), "1,000 Meters = 1 Kilometers")

    def test_format_conversion_without_result(self):
        conversion = Conversion("Length", 5, "Meters", "Lightyears")
        self.assertEqual(format_conversion(conversion), "5 Meters = 0 Lightyears")


if __name__ == "__main__":
    unittest.main()
