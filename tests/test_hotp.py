import hashlib
import hmac
import unittest

from otp_stack.errors import ConfigError, CounterRangeError, EmptyInputError, OTPError
from otp_stack.hotp import MAX_COUNTER, compute, counter_bytes, hotp_code, truncate

RFC4226_SECRET = b"12345678901234567890"
RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


class HOTPTests(unittest.TestCase):
    def test_rfc4226_vectors(self):
        for counter, expected in enumerate(RFC4226_CODES):
            self.assertEqual(hotp_code(RFC4226_SECRET, counter), expected)

    def test_first_two_vectors_as_integers(self):
        self.assertEqual(compute(RFC4226_SECRET, 0, 6, "sha1"), 755224)
        self.assertEqual(compute(RFC4226_SECRET, 1, 6, "sha1"), 287082)

    def test_counter_big_endian(self):
        self.assertEqual(counter_bytes(1), b"\x00\x00\x00\x00\x00\x00\x00\x01")
        self.assertEqual(counter_bytes(0x0102030405060708), bytes(range(1, 9)))
        self.assertEqual(counter_bytes(MAX_COUNTER), b"\xff" * 8)

    def test_counter_out_of_range(self):
        with self.assertRaises(CounterRangeError) as ctx:
            counter_bytes(-1)
        self.assertEqual(ctx.exception.counter, -1)
        self.assertIsInstance(ctx.exception, OTPError)
        self.assertIsInstance(ctx.exception, ValueError)
        with self.assertRaises(CounterRangeError):
            counter_bytes(MAX_COUNTER + 1)
        with self.assertRaises(CounterRangeError):
            compute(RFC4226_SECRET, -5)

    def test_rfc4226_truncation_example(self):
        digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
        self.assertEqual(truncate(digest), 0x50EF7F19)
        self.assertEqual(truncate(digest) % 10**6, 872921)

    def test_truncation_clears_top_bit(self):
        digest = b"\xff" * 19 + b"\x00"
        self.assertEqual(truncate(digest), 0x7FFFFFFF)
        for counter in range(0, 2000, 7):
            for algorithm in ("sha1", "sha256", "sha512"):
                value = truncate(hmac.new(b"secret", counter_bytes(counter), algorithm).digest())
                self.assertGreaterEqual(value, 0)
                self.assertLess(value, 2**31)

    def test_short_digest_fails_fast(self):
        # MD5-sized digest with offset 15 leaves only one byte
        with self.assertRaises(ConfigError):
            truncate(b"\x00" * 15 + b"\x0f")

    def test_code_range(self):
        for digits in (1, 6, 8, 10):
            for counter in range(50):
                self.assertLess(compute(b"key", counter, digits), 10**digits)

    def test_algorithms_differ(self):
        codes = {compute(RFC4226_SECRET, 0, 8, algorithm) for algorithm in ("sha1", "sha256", "sha512")}
        self.assertEqual(len(codes), 3)

    def test_matches_reference_hmac(self):
        digest = hmac.new(RFC4226_SECRET, counter_bytes(42), hashlib.sha256).digest()
        self.assertEqual(compute(RFC4226_SECRET, 42, 8, "SHA-256"), truncate(digest) % 10**8)

    def test_empty_secret_rejected(self):
        with self.assertRaises(EmptyInputError):
            compute(b"", 0)

    def test_unsupported_algorithm(self):
        with self.assertRaises(ConfigError):
            compute(RFC4226_SECRET, 0, 6, "md5")

    def test_invalid_digits(self):
        with self.assertRaises(ConfigError):
            compute(RFC4226_SECRET, 0, 0)
        with self.assertRaises(ConfigError):
            compute(RFC4226_SECRET, 0, 11)


if __name__ == "__main__":
    unittest.main()
