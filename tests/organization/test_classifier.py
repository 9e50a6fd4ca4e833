"""Tests for file classification."""

import os
import re
from datetime import datetime
from pathlib import Path

import pytest

from dir_organizer.formats import DEFAULT_CATEGORY, DEFAULT_FORMATS
from dir_organizer.organization.classifier import (
    classify_by_date,
    classify_by_extension,
    get_file_extension,
    is_eligible_file,
    matches_specific_formats,
)


class TestGetFileExtension:
    """Test extension extraction."""

    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("photo.jpg", "jpg"),
            ("archive.tar.gz", "gz"),
            ("REPORT.PDF", "PDF"),
            ("notes", ""),
            ("trailing.", ""),
            (".bashrc", "bashrc"),
        ],
    )
    def test_extension(self, file_name, expected):
        assert get_file_extension(file_name) == expected


class TestClassifyByExtension:
    """Test table-based classification."""

    def test_every_table_extension_any_case(self):
        """Each listed extension maps to its category whatever the case."""
        for category, extensions in DEFAULT_FORMATS.items():
            for ext in extensions:
                for variant in (ext.upper(), ext.lower(), ext.capitalize()):
                    assert classify_by_extension(f"file.{variant}") == category

    def test_unknown_extension_is_miscellaneous(self):
        assert classify_by_extension("data.qwertyuiop") == "Miscellaneous"
        assert DEFAULT_CATEGORY == "Miscellaneous"

    def test_no_extension_is_miscellaneous(self):
        assert classify_by_extension("Makefile") == "Miscellaneous"

    def test_custom_default_category(self):
        assert classify_by_extension("data.xyz", {}, "Other") == "Other"

    def test_first_category_wins(self):
        """Table order decides when two categories list the same extension."""
        formats = {"First": ["DAT"], "Second": ["DAT"]}

        assert classify_by_extension("a.dat", formats) == "First"

    def test_lowercase_table_entries_match(self):
        formats = {"Images": ["jpg"]}

        assert classify_by_extension("a.JPG", formats) == "Images"

    def test_custom_table(self):
        formats = {"Images": ["JPG"], "Text": ["TXT"]}

        assert classify_by_extension("a.jpg", formats) == "Images"
        assert classify_by_extension("b.txt", formats) == "Text"
        assert classify_by_extension("notes", formats) == "Miscellaneous"


class TestMatchesSpecificFormats:
    """Test the case-sensitive extension filter."""

    def test_exact_match(self):
        assert matches_specific_formats("x.png", ["png"])

    def test_case_mismatch_is_excluded(self):
        assert not matches_specific_formats("x.PNG", ["png"])

    def test_other_extension(self):
        assert not matches_specific_formats("y.txt", ["png", "jpg"])

    def test_no_extension_matches_empty_entry(self):
        assert not matches_specific_formats("notes", ["png"])
        assert matches_specific_formats("notes", [""])


class TestClassifyByDate:
    """Test date-based classification."""

    def test_uses_modification_date(self, temp_dir: Path):
        file_path = temp_dir / "report.pdf"
        file_path.write_text("content")
        mtime = datetime(2021, 3, 14, 15, 9, 26).timestamp()
        os.utime(file_path, (mtime, mtime))

        assert classify_by_date(file_path) == "2021-03-14"

    def test_matches_local_date_of_mtime(self, temp_dir: Path):
        file_path = temp_dir / "now.txt"
        file_path.write_text("content")

        category = classify_by_date(file_path)

        expected = datetime.fromtimestamp(file_path.stat().st_mtime)
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", category)
        assert category == expected.strftime("%Y-%m-%d")

    def test_accepts_string_path(self, temp_dir: Path):
        file_path = temp_dir / "a.txt"
        file_path.write_text("content")
        mtime = datetime(1999, 12, 31, 12, 0, 0).timestamp()
        os.utime(file_path, (mtime, mtime))

        assert classify_by_date(str(file_path)) == "1999-12-31"

    def test_missing_file_raises(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError):
            classify_by_date(temp_dir / "missing.txt")


class TestIsEligibleFile:
    """Test which entries get organized."""

    def test_regular_file(self, temp_dir: Path):
        (temp_dir / "a.jpg").write_text("x")

        assert is_eligible_file("a.jpg", temp_dir)

    def test_hidden_file(self, temp_dir: Path):
        (temp_dir / ".hidden").write_text("x")

        assert not is_eligible_file(".hidden", temp_dir)

    def test_directory(self, temp_dir: Path):
        (temp_dir / "Images").mkdir()

        assert not is_eligible_file("Images", temp_dir)

    def test_hidden_directory(self, temp_dir: Path):
        (temp_dir / ".git").mkdir()

        assert not is_eligible_file(".git", str(temp_dir))
