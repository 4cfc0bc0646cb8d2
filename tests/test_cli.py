import json
import tempfile
import unittest
from pathlib import Path

import main


class CliTests(unittest.TestCase):
    def test_json_output_written_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "grid.json"
            main.main([
                "--size", "7",
                "--words", "seat", "set", "eat", "east", "tea",
                "--seed", "4",
                "--output", str(output),
                "--log-level", "WARNING",
            ])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["rows"], 7)
        self.assertEqual(payload["cols"], 7)
        self.assertGreaterEqual(len(payload["placed"]), 1)
        placed = {entry["word"] for entry in payload["placed"]}
        self.assertEqual(placed | set(payload["unplaced"]), {"SEAT", "SET", "EAT", "EAST", "TEA"})
        self.assertEqual(payload["validation"], [])

    def test_text_output_from_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("# demo\nseat\ntea\n", encoding="utf-8")
            output = Path(tmpdir) / "grid.txt"
            main.main([
                "--height", "7",
                "--width", "7",
                "--words-file", str(words),
                "--format", "text",
                "--output", str(output),
                "--log-level", "WARNING",
            ])
            text = output.read_text(encoding="utf-8")
        self.assertIn("--- Words ---", text)
        self.assertIn("SEAT", text)

    def test_missing_shape_is_an_error(self) -> None:
        with self.assertRaises(SystemExit):
            main.main(["--words", "seat", "--log-level", "WARNING"])

    def test_degenerate_shape_is_an_error(self) -> None:
        with self.assertRaises(SystemExit):
            main.main(["--size", "0", "--words", "seat", "--log-level", "WARNING"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
