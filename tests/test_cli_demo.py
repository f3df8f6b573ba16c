from __future__ import annotations

import contextlib
import io
from pathlib import Path
import tempfile
import unittest

import main as cli


class DemoCommandTests(unittest.TestCase):
    def test_demo_writes_ppm(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "demo.ppm"
            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                code = cli.main(["demo", str(out), "--width", "16", "--height", "12", "--background", "0x102030"])
            data = out.read_bytes()
        self.assertEqual(code, 0)
        header = b"P6\n16 12 255\n"
        self.assertTrue(data.startswith(header))
        self.assertEqual(len(data), len(header) + 16 * 12 * 3)
        # Top-left corner keeps the background, packed as c0=0x30 c1=0x20 c2=0x10.
        self.assertEqual(data[len(header) : len(header) + 3], b"\x30\x20\x10")
        self.assertIn("saved 16x12", stdout.getvalue())

    def test_demo_reports_export_failure(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "missing" / "demo.ppm"
            with self.assertLogs("rasterkit", level="ERROR"):
                code = cli.main(["demo", str(out)])
        self.assertEqual(code, 1)

    def test_demo_scene_draws_each_primitive(self) -> None:
        canvas = cli.draw_demo(32, 32)
        self.assertEqual(canvas.revision, 5)
        self.assertNotEqual(canvas.buffer.get(16, 16), 0)


if __name__ == "__main__":
    unittest.main()
