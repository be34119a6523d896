"""Tests for the analyzer pipeline."""

from __future__ import annotations

import dataclasses

import pytest

from shapefinder.config import Settings
from shapefinder.engine.config import AnalyzerConfig
from shapefinder.engine.extractor import Grouping
from shapefinder.engine.pipeline import ImageAnalyzer, find_groupings
from shapefinder.errors import InvalidArgumentError
from shapefinder.imaging.binarize import BinaryImage, GrayscaleBinarizer, OtsuBinarizer
from tests.conftest import FULL_3X3

BLUE = (0, 0, 255)


def test_find_groupings():
    grid = BinaryImage.from_rows(FULL_3X3)
    assert find_groupings(grid) == [Grouping(0, 0, 2, 2)]
    assert find_groupings(grid, noise_reduction=9) == []


def test_find_groupings_is_repeatable():
    grid = BinaryImage.from_rows(["#.#.", "#..#", "..##"])
    assert find_groupings(grid) == find_groupings(grid)


def test_analyze_finds_square_and_drops_dot(sample_image):
    result = ImageAnalyzer().analyze(sample_image)
    assert result.groupings == [Grouping(x1=2, y1=2, x2=4, y2=4)]
    assert (result.width, result.height) == (10, 10)
    assert result.foreground_pixels == 10
    assert set(result.timings_ms) == {"resize", "binarize", "label", "render"}


def test_outline_drawn_on_copy(sample_image):
    out = ImageAnalyzer().outline_distinct_objects(sample_image)
    assert out.getpixel((2, 2)) == BLUE
    assert out.getpixel((4, 4)) == BLUE
    assert out.getpixel((8, 8)) == (0, 0, 0)
    assert sample_image.getpixel((2, 2)) == (0, 0, 0)


def test_outline_color(sample_image):
    config = AnalyzerConfig(outline_color="#ff0000")
    out = ImageAnalyzer(config).outline_distinct_objects(sample_image)
    assert out.getpixel((2, 3)) == (255, 0, 0)


def test_noise_reduction_drops_small_shapes(sample_image):
    config = AnalyzerConfig(noise_reduction=9)
    assert ImageAnalyzer(config).analyze(sample_image).groupings == []


def test_resize(sample_image):
    config = AnalyzerConfig(resize=(20, 20))
    result = ImageAnalyzer(config).analyze(sample_image)
    assert result.image.size == (20, 20)
    assert (result.width, result.height) == (20, 20)
    assert len(result.groupings) >= 1


def test_otsu_matches_grayscale_on_clean_image(sample_image):
    gray = ImageAnalyzer(AnalyzerConfig(binarizer=GrayscaleBinarizer())).analyze(sample_image)
    otsu = ImageAnalyzer(AnalyzerConfig(binarizer=OtsuBinarizer())).analyze(sample_image)
    assert gray.groupings == otsu.groupings


def test_blank_image(blank_image):
    result = ImageAnalyzer().analyze(blank_image)
    assert result.groupings == []
    assert result.foreground_pixels == 0


class TestAnalyzerConfig:
    @pytest.mark.parametrize("value", [0, -5, 1])
    def test_noise_reduction_clamped(self, value):
        assert AnalyzerConfig(noise_reduction=value).noise_reduction == 1

    def test_unknown_outline_color_rejected(self):
        with pytest.raises(InvalidArgumentError):
            AnalyzerConfig(outline_color="notacolor")

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            AnalyzerConfig().noise_reduction = 3

    def test_from_settings(self):
        settings = Settings(default_threshold=90, default_noise_reduction=0, default_outline_color="red")
        config = AnalyzerConfig.from_settings(settings)
        assert isinstance(config.binarizer, GrayscaleBinarizer)
        assert config.binarizer.threshold == 90
        assert config.noise_reduction == 1
        assert config.outline_color == "red"
        assert config.resize is None
