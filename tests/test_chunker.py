"""
Tests for notifier.chunker — splitting reports into Telegram-sized messages.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import unittest
from notifier.chunker import MAX_MESSAGE_LENGTH, SAFETY_MARGIN, chunk_message


def _lines(count, width):
    return [f"{i:0{width}d}" for i in range(count)]


def _reassemble(chunks):
    return "\n".join(c.text for c in chunks)


class TestChunkMessage(unittest.TestCase):
    """Tests for chunk_message()."""

    def test_short_body_single_chunk(self):
        body = _lines(10, 50)
        chunks = chunk_message(body, 4096)
        self.assertEqual(len(chunks), 1)
        self.assertEqual(chunks[0].text, "\n".join(body))
        self.assertEqual(chunks[0].ordinal, 1)

    def test_body_exactly_at_limit_single_chunk(self):
        body = "x" * MAX_MESSAGE_LENGTH
        chunks = chunk_message(body)
        self.assertEqual(len(chunks), 1)
        self.assertEqual(chunks[0].text, body)

    def test_two_hundred_lines_two_chunks(self):
        body = _lines(200, 30)
        chunks = chunk_message(body, 4096, 256)
        self.assertEqual(len(chunks), 2)
        for chunk in chunks:
            self.assertLessEqual(len(chunk.text), 4096 - 256)
        self.assertEqual(_reassemble(chunks), "\n".join(body))
        self.assertEqual([c.ordinal for c in chunks], [1, 2])

    def test_boundaries_between_lines(self):
        body = _lines(500, 40)
        chunks = chunk_message(body)
        seen = []
        for chunk in chunks:
            seen.extend(chunk.text.split("\n"))
        self.assertEqual(seen, body)
        for chunk in chunks:
            self.assertLessEqual(len(chunk.text), MAX_MESSAGE_LENGTH)

    def test_string_body_round_trip(self):
        body = "HOSTNAME: box\n\n" + "\n".join(_lines(300, 25))
        self.assertEqual(_reassemble(chunk_message(body)), body)

    def test_blank_lines_preserved(self):
        body = ["a" * 100, ""] * 60
        chunks = chunk_message(body, 1000, 100)
        self.assertGreater(len(chunks), 1)
        self.assertEqual(_reassemble(chunks), "\n".join(body))

    def test_oversized_line_own_chunk(self):
        long_line = "y" * 5000
        body = ["head", long_line, "tail"]
        chunks = chunk_message(body)
        self.assertEqual([c.text for c in chunks], ["head", long_line, "tail"])
        self.assertEqual(_reassemble(chunks), "\n".join(body))

    def test_oversized_first_line(self):
        body = ["z" * 5000, "after"]
        chunks = chunk_message(body)
        self.assertEqual([len(c.text) for c in chunks], [5000, 5])

    def test_small_limits(self):
        body = ["abc", "def", "ghi"]
        chunks = chunk_message(body, max_length=8, margin=0)
        self.assertEqual([c.text for c in chunks], ["abc\ndef", "ghi"])

    def test_empty_body(self):
        self.assertEqual(chunk_message([]), [])
        self.assertEqual(chunk_message(""), [])

    def test_invalid_limits(self):
        with self.assertRaises(ValueError):
            chunk_message(["a"], max_length=100, margin=100)
        with self.assertRaises(ValueError):
            chunk_message(["a"], max_length=0, margin=0)

    def test_default_margin(self):
        self.assertEqual(SAFETY_MARGIN, 256)


if __name__ == "__main__":
    unittest.main()
