import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from notekeeper.resources._common_types import (  # noqa: E402
    _normalize_id_sequence,
    _normalize_selected_tags,
    _normalize_validation,
    _reject,
)
from notekeeper.utils import unique_in_order  # noqa: E402


class CommonTypesTests(unittest.TestCase):
    def test_normalize_validation(self):
        self.assertEqual(_normalize_validation("strict"), "strict")
        self.assertEqual(_normalize_validation(" OFF "), "off")
        self.assertEqual(_normalize_validation(None), "warn")
        self.assertEqual(_normalize_validation(None, "strict"), "strict")

    def test_normalize_validation_unknown(self):
        with self.assertLogs("notekeeper.resources._common_types", level="WARNING"):
            self.assertEqual(_normalize_validation("loud"), "warn")

    def test_normalize_id_sequence_single(self):
        self.assertEqual(_normalize_id_sequence("a"), ["a"])

    def test_normalize_id_sequence_sequence(self):
        self.assertEqual(_normalize_id_sequence(["a", "b", "a", "", 3]), ["a", "b"])

    def test_normalize_id_sequence_invalid(self):
        self.assertIsNone(_normalize_id_sequence(5))
        self.assertIsNone(_normalize_id_sequence(""))
        self.assertIsNone(_normalize_id_sequence(["", None]))
        self.assertIsNone(_normalize_id_sequence(b"ab"))

    def test_normalize_selected_tags(self):
        tags = [
            {"id": "a", "label": "home", "extra": 1},
            {"id": "b", "label": "work"},
            {"id": "a", "label": "home"},
        ]
        self.assertEqual(
            _normalize_selected_tags(tags),
            [{"id": "a", "label": "home"}, {"id": "b", "label": "work"}],
        )

    def test_normalize_selected_tags_empty(self):
        self.assertEqual(_normalize_selected_tags([]), [])
        self.assertEqual(_normalize_selected_tags(()), [])

    def test_normalize_selected_tags_any_iterable(self):
        tags = {"a": {"id": "a", "label": "home"}, "b": {"id": "b", "label": "work"}}
        expected = [{"id": "a", "label": "home"}, {"id": "b", "label": "work"}]
        self.assertEqual(_normalize_selected_tags(tags.values()), expected)
        self.assertEqual(_normalize_selected_tags(tag for tag in tags.values()), expected)
        self.assertEqual(_normalize_selected_tags(iter([])), [])

    def test_normalize_selected_tags_invalid(self):
        self.assertIsNone(_normalize_selected_tags("a"))
        self.assertIsNone(_normalize_selected_tags(None))
        self.assertIsNone(_normalize_selected_tags([{"id": "a"}]))
        self.assertIsNone(_normalize_selected_tags(["a"]))
        self.assertIsNone(_normalize_selected_tags({"id": "a", "label": "home"}))
        self.assertIsNone(_normalize_selected_tags(tag for tag in ["a"]))

    def test_reject(self):
        logger = logging.getLogger("notekeeper.tests")
        with self.assertLogs("notekeeper.tests", level="WARNING") as logs:
            _reject(logger, "warn", "Invalid thing", 3)
        self.assertIn("Invalid thing: 3", logs.output[0])
        with self.assertRaises(ValueError):
            _reject(logger, "strict", "Invalid thing", 3)
        self.assertIsNone(_reject(logger, "off", "Invalid thing", 3))

    def test_unique_in_order(self):
        self.assertEqual(unique_in_order(["b", "a", "b", "c", "a"]), ["b", "a", "c"])
