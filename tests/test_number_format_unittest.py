from decimal import Decimal
import json
import math
import struct
import unittest

from json_writer.number_format import format_decimal, format_float, format_int


def _bits(value):
    return struct.pack("<d", value)


class TestNumberFormat(unittest.TestCase):
    def test_whole_floats_drop_fraction(self):
        self.assertEqual(format_float(0.0), "0")
        self.assertEqual(format_float(2.0), "2")
        self.assertEqual(format_float(-2.0), "-2")
        self.assertEqual(format_float(1e15), "1000000000000000")

    def test_shortest_repr(self):
        self.assertEqual(format_float(3.141592653589793), "3.141592653589793")
        self.assertEqual(format_float(0.1), "0.1")
        self.assertEqual(format_float(-0.1), "-0.1")

    def test_compact_exponent(self):
        self.assertEqual(format_float(1.5e30), "1.5e30")
        self.assertEqual(format_float(-2.220446049250313e-16), "-2.220446049250313e-16")
        self.assertEqual(format_float(1e-7), "1e-7")
        self.assertEqual(format_float(1e16), "1e16")

    def test_negative_zero(self):
        self.assertEqual(format_float(-0.0), "-0")

    def test_non_finite_is_none(self):
        self.assertIsNone(format_float(float("nan")))
        self.assertIsNone(format_float(float("inf")))
        self.assertIsNone(format_float(float("-inf")))

    def test_round_trip_is_bit_exact(self):
        values = [
            0.1 + 0.2,
            1.0 / 3.0,
            -5.0 / 3.0,
            5e-324,
            2.2250738585072014e-308,
            1.7976931348623157e308,
            123456789.125,
            9007199254740993.0,
            1e-5,
            1e22,
            math.pi,
            -math.e,
        ]
        for v in values:
            text = format_float(v)
            self.assertEqual(_bits(float(json.loads(text))), _bits(v), msg=text)

    def test_int_digits(self):
        self.assertEqual(format_int(0), "0")
        self.assertEqual(format_int(-1), "-1")
        self.assertEqual(format_int(255), "255")
        self.assertEqual(format_int(2**64 - 1), "18446744073709551615")
        self.assertEqual(
            format_int(2**128 - 1), "340282366920938463463374607431768211455"
        )
        self.assertEqual(format_int(-(2**127)), "-170141183460469231731687303715884105728")

    def test_int_past_str_digit_limit(self):
        self.assertEqual(format_int(10**5000), "1" + "0" * 5000)
        self.assertEqual(format_int(-(10**5000)), "-1" + "0" * 5000)
        big = 7 * 10**9000 + 12345
        text = format_int(big)
        self.assertEqual(len(text), 9001)
        self.assertTrue(text.startswith("7000"))
        self.assertTrue(text.endswith("00012345"))
        self.assertEqual(text.count("7"), 1)

    def test_decimal_verbatim(self):
        self.assertEqual(format_decimal(Decimal("1.50")), "1.50")
        self.assertEqual(format_decimal(Decimal("-12")), "-12")
        self.assertEqual(json.loads(format_decimal(Decimal("1E+2"))), 100.0)

    def test_decimal_non_finite_is_none(self):
        self.assertIsNone(format_decimal(Decimal("NaN")))
        self.assertIsNone(format_decimal(Decimal("-Infinity")))


if __name__ == "__main__":
    unittest.main()
