import unittest
import sys
import os
import io
from contextlib import redirect_stdout, redirect_stderr

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_explorer.main import main, build_parser, default_height

class TestCLI(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate_text_with_solution(self):
        code, out = self.run_main(["generate", "--width", "10", "--height", "12", "--seed", "3", "--solve", "--text"])
        self.assertEqual(code, 0)
        lines = out.strip().split("\n")
        self.assertEqual(len(lines), 2 * 12 + 1)
        self.assertIn("S", lines[1])
        self.assertIn("G", lines[-2])
        self.assertIn("*", out)

    def test_generate_headless_stats(self):
        code, out = self.run_main(["generate", "--width", "10", "--height", "10", "--stats"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_default_height_fits_window(self):
        self.assertEqual(default_height(50), 27)
        # 124px cells leave room for 5 rows: clamped up to the minimum
        self.assertEqual(default_height(10), 10)
        args = build_parser().parse_args(["generate"])
        self.assertEqual(args.width, 50)
        self.assertIsNone(args.height)

    def test_dimension_bounds(self):
        parser = build_parser()
        for bad in ["9", "301", "abc"]:
            with redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    parser.parse_args(["generate", "--width", bad])
        self.assertEqual(parser.parse_args(["generate", "--width", "300"]).width, 300)

    def test_invalid_colour(self):
        for flag in ["--background", "--foreground", "--solution"]:
            with redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    main(["generate", "--visual", flag, "notacolour"])
            self.assertEqual(ctx.exception.code, 2)
        args = build_parser().parse_args(["generate", "--background", "#000", "--solution", "gold"])
        self.assertEqual((args.background, args.solution), ("#000", "gold"))

    def test_benchmark(self):
        code, out = self.run_main(["benchmark", "--sizes", "10", "12"])
        self.assertEqual(code, 0)
        self.assertIn("10x10", out)
        self.assertIn("12x12", out)

    def test_no_command(self):
        code, out = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("generate", out)

if __name__ == '__main__':
    unittest.main()
