"""
Test suite for word scanning and word lists.
"""

import pytest
from src.verifiers import Cell, find_new_words, find_word_coordinates, load_word_list, locate_words


# Initial grid after swapping (2, 1) and (2, 2)
SWAPPED = [
    ["C", "T", "A"],
    ["O", "A", "R"],
    ["W", "N", "E"],
]
A, B = Cell(2, 1), Cell(2, 2)
LEXICON = {"CAT", "WAN", "WAR", "ARE", "TAN"}


class TestFindNewWords:
    """Test cases for find_new_words."""

    def test_words_in_touched_columns(self):
        """Both columns the swap passes through are scanned."""
        assert find_new_words(SWAPPED, A, B, LEXICON, 3) == ["ARE", "TAN"]

    def test_already_found_excluded(self):
        assert find_new_words(SWAPPED, A, B, LEXICON, 3, {"TAN"}) == ["ARE"]

    def test_untouched_lines_ignored(self):
        """Words elsewhere on the grid do not count for this swap."""
        grid = [["C", "A", "T"], ["D", "O", "G"]]
        words = find_new_words(grid, Cell(0, 0), Cell(0, 1), {"CAT", "DOG"}, 3)
        assert words == ["CAT"]

    def test_exact_length_windows(self):
        """Only windows of the level's word length are considered."""
        grid = [["X", "C", "A", "T", "S"]]
        words = find_new_words(grid, Cell(0, 0), Cell(0, 1), {"CAT", "CATS", "AT"}, 3)
        assert words == ["CAT"]

    def test_lower_case_grid(self):
        grid = [["c", "a", "t"]]
        assert find_new_words(grid, Cell(0, 0), Cell(0, 1), {"CAT"}, 3) == ["CAT"]

    def test_nothing_formed(self):
        assert find_new_words(SWAPPED, A, B, {"DOG"}, 3) == []


class TestFindWordCoordinates:
    """Test cases for find_word_coordinates and locate_words."""

    def test_word_in_row(self):
        grid = [["C", "A", "T"], ["O", "A", "R"]]
        cells = find_word_coordinates(grid, "cat", Cell(0, 1), Cell(0, 2))
        assert cells == [(0, 0), (0, 1), (0, 2)]

    def test_word_in_column(self):
        """Columns are searched when the rows do not hold the word."""
        assert find_word_coordinates(SWAPPED, "TAN", A, B) == [(0, 1), (1, 1), (2, 1)]

    def test_word_missing(self):
        assert find_word_coordinates(SWAPPED, "DOG", A, B) == []

    def test_swap_off_grid(self):
        assert find_word_coordinates(SWAPPED, "TAN", Cell(5, 5), B) == []

    def test_locate_words(self):
        placements = locate_words(SWAPPED, ["ARE", "TAN", "DOG"], A, B)
        assert [p.word for p in placements] == ["ARE", "TAN"]
        assert placements[0].cells == [(0, 2), (1, 2), (2, 2)]


class TestWordList:
    """Test cases for load_word_list."""

    def test_normalizes_words(self, tmp_path):
        """Words are upper-cased; short and non-alphabetic lines are skipped."""
        path = tmp_path / "words.txt"
        path.write_text("cat\nDog\n  tan \nab\nit's\n\n")
        assert load_word_list(path, min_length=3) == {"CAT", "DOG", "TAN"}

    def test_cached_per_path(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\n")
        assert load_word_list(path) is load_word_list(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")
