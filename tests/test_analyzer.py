"""
Tests for file-level orientation helpers.
"""
import hashlib
import pytest

from orientkit import analyze_photo, read_orientation_file, sha256_file
from conftest import build_jpeg


class TestReadOrientationFile:

    def test_reads_orientation(self, sample_image):
        assert read_orientation_file(sample_image) == 6

    def test_accepts_str_path(self, sample_image):
        assert read_orientation_file(str(sample_image)) == 6

    def test_nonexistent_raises(self, temp_dir):
        with pytest.raises(ValueError, match="does not exist"):
            read_orientation_file(temp_dir / "missing.jpg")

    def test_directory_raises(self, temp_dir):
        with pytest.raises(ValueError, match="not a file"):
            read_orientation_file(temp_dir)

    def test_wrong_extension_raises(self, temp_dir):
        png = temp_dir / "image.png"
        png.write_bytes(b"\x89PNG\r\n\x1a\n")

        with pytest.raises(ValueError, match="Unsupported file type"):
            read_orientation_file(png)


class TestAnalyzePhoto:

    def test_known_orientation(self, sample_image):
        result = analyze_photo(sample_image)

        assert result["filename"] == "rotated.jpg"
        assert result["orientation"] == 6
        assert result["rotation"] == 90
        assert result["flipped"] is False
        assert result["diagnostic"] is None

    def test_unknown_orientation(self, temp_dir):
        path = temp_dir / "no_tag.jpg"
        path.write_bytes(build_jpeg(orientation=None))

        result = analyze_photo(path)

        assert result["orientation"] == -1
        assert result["rotation"] is None
        assert result["flipped"] is None
        assert result["diagnostic"] == "Rotation information was not found"

    def test_sha256(self, sample_image):
        expected = hashlib.sha256(sample_image.read_bytes()).hexdigest()

        assert sha256_file(sample_image) == expected
        assert analyze_photo(sample_image)["sha256sum"] == expected
