#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for image source parsing and classification."""
import os

import pytest

from mdlayout.builder import default_image_builder, parse_image_source
from mdlayout.exceptions import AttributeParseError
from mdlayout.layout import ImageRun


@pytest.mark.unit
class TestParseImageSource:
    """Test the ``#WxH`` size suffix."""

    def test_without_suffix(self):
        assert parse_image_source("https://example.com/a.png") == ("https://example.com/a.png", None, None)

    def test_with_suffix(self):
        assert parse_image_source("/upload/a.png#320x200") == ("/upload/a.png", 320.0, 200.0)

    def test_fractional_sizes(self):
        assert parse_image_source("a.png#12.5x7") == ("a.png", 12.5, 7.0)

    @pytest.mark.parametrize("src", ["a.png#", "a.png#320", "a.png#1x2x3", "a.png#x", "a.png#1x", "a#1x2#3"])
    def test_malformed_suffix(self, src):
        with pytest.raises(AttributeParseError) as exc_info:
            parse_image_source(src)
        assert exc_info.value.tag == "img"
        assert exc_info.value.attribute == "src"
        assert exc_info.value.parameter_value == src


@pytest.mark.unit
class TestDefaultImageBuilder:
    """Test classification of image URIs."""

    @pytest.mark.parametrize("uri", ["http://example.com/a.png", "https://example.com/a.png"])
    def test_network(self, uri):
        assert default_image_builder(uri) == ImageRun(uri, "network")

    def test_data_uri(self):
        uri = "data:image/png;base64,iVBORw0KGgo="
        assert default_image_builder(uri).source == "data"

    def test_resource(self):
        image = default_image_builder("resource:images/logo.png", image_directory="/ignored")
        assert image == ImageRun("images/logo.png", "resource")

    def test_file_uri(self):
        assert default_image_builder("file:///tmp/a.png") == ImageRun("/tmp/a.png", "file")

    def test_relative_path_joined_with_directory(self):
        image = default_image_builder("pics/a.png", image_directory="/srv/docs")
        assert image.uri == os.path.join("/srv/docs", "pics/a.png")
        assert image.source == "file"

    def test_absolute_path_kept(self):
        assert default_image_builder("/upload/a.png", image_directory="/srv/docs").uri == "/upload/a.png"

    def test_relative_path_without_directory(self):
        assert default_image_builder("a.png").uri == "a.png"

    def test_metadata_carried(self):
        image = default_image_builder("a.png", None, 10.0, 20.0, "Title", "Alt")
        assert (image.width, image.height, image.title, image.alt) == (10.0, 20.0, "Title", "Alt")
