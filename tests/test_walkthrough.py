import io
import unittest
from contextlib import redirect_stderr

from sampleoptional import (
    Computer, Soundcard, USB, ConsoleLogger, of_nullable,
    usb_version, usb_version_checked, usb_version_unchecked,
    soundcard_or_default, require_soundcard, is_usb3, run,
)
from sampleoptional.__main__ import main


class TestNavigation(unittest.TestCase):
    def graphs(self):
        return [
            (None, None),
            (Computer(), None),
            (Computer(Soundcard("a")), None),
            (Computer(Soundcard("a", USB())), None),
            (Computer(Soundcard("a", USB("3.0"))), "3.0"),
        ]

    def test_checked_and_optional_agree(self):
        for computer, expected in self.graphs():
            self.assertEqual(usb_version_checked(computer), expected)
            self.assertEqual(usb_version(computer).or_else(None), expected)

    def test_unchecked_fails_on_missing_link(self):
        with self.assertRaises(AttributeError):
            usb_version_unchecked(Computer())
        with self.assertRaises(AttributeError):
            usb_version_unchecked(Computer(Soundcard("a")))
        self.assertEqual(usb_version_unchecked(Computer(Soundcard("a", USB("2.0")))), "2.0")


class TestDefaults(unittest.TestCase):
    def test_missing_soundcard_uses_default(self):
        c = Computer()
        self.assertTrue(of_nullable(c.get_soundcard()).is_empty())
        sc = of_nullable(c.get_soundcard()).or_else(Soundcard("Default soundcard"))
        self.assertEqual(sc.description, "Default soundcard")
        self.assertEqual(soundcard_or_default(c).description, "Default soundcard")

    def test_present_soundcard_kept(self):
        mine = Soundcard("My Soundcard")
        self.assertIs(soundcard_or_default(Computer(mine)), mine)
        self.assertIs(require_soundcard(Computer(mine)), mine)

    def test_require_soundcard_raises(self):
        with self.assertRaises(RuntimeError):
            require_soundcard(Computer())


class TestFilter(unittest.TestCase):
    def test_usb3(self):
        self.assertTrue(of_nullable(USB("3.0")).filter(lambda u: u.get_version().lower() == "3.0").is_present())
        self.assertFalse(of_nullable(USB("2.0")).filter(lambda u: u.get_version().lower() == "3.0").is_present())
        self.assertTrue(is_usb3(USB("3.0")))
        self.assertFalse(is_usb3(USB("2.0")))
        self.assertFalse(is_usb3(USB()))
        self.assertFalse(is_usb3(None))


class TestRun(unittest.TestCase):
    def test_run_logs_every_step(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            run(ConsoleLogger(level="VERBOSE"))
        out = buf.getvalue()
        self.assertIn("unchecked chain failed", out)
        self.assertIn("checked chain", out)
        self.assertIn("optional chain", out)
        self.assertIn("present via if_present", out)
        self.assertIn("mine=My Soundcard", out)
        self.assertIn("bare=Default soundcard", out)
        self.assertEqual(out.count(" INFO: ok "), 1)
        self.assertEqual(out.count("not a 3.0 usb"), 2)

    def test_main_returns_zero(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertEqual(main(), 0)
        self.assertIn("optional chain", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
