"""Tests for free-text item parsing."""

from rankly.models.actions import RawItem
from rankly.services.profile import CandidateNormalizer
from rankly.utils import parse_item_lines


class TestParseItemLines:
    def test_names_and_images(self):
        text = "Pizza    http://img/pizza.png\nPho\nTacos    http://img/tacos.png"

        assert parse_item_lines(text) == [
            RawItem(name="Pizza", image="http://img/pizza.png"),
            RawItem(name="Pho"),
            RawItem(name="Tacos", image="http://img/tacos.png"),
        ]

    def test_blank_lines_dropped(self):
        assert parse_item_lines("\nA\n   \n\nB\n") == [RawItem(name="A"), RawItem(name="B")]

    def test_image_only_line_has_empty_name(self):
        """A line starting with the separator carries only an image."""
        assert parse_item_lines("    http://img/x.png") == [RawItem(name="", image="http://img/x.png")]

    def test_image_only_line_never_becomes_a_candidate(self):
        items = parse_item_lines("Pizza\n    http://img/x.png")

        assert list(CandidateNormalizer.normalize(items)) == ["Pizza"]

    def test_extra_columns_ignored(self):
        assert parse_item_lines("A    a.png    note") == [RawItem(name="A", image="a.png")]

    def test_custom_separator(self):
        assert parse_item_lines("A|a.png\nB", separator="|") == [RawItem(name="A", image="a.png"), RawItem(name="B")]

    def test_empty_text(self):
        assert parse_item_lines("") == []
