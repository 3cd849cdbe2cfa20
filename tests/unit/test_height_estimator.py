"""
Unit tests for block height estimation.

Tests cover:
- Heuristic baselines per block kind
- Text wrapping approximation for summary and skills
- px/pt consistency of estimates
- Optional font-size scaling
- Injected measurer and whole-run fallback to the heuristic
"""

import math
from unittest.mock import MagicMock

import pytest

from src.layout import (
    ContentBlock,
    EducationBlock,
    HeaderBlock,
    HeightEstimate,
    HeightEstimator,
    JobBlock,
    ResumeFormat,
    SectionTitleBlock,
    SkillsBlock,
    SummaryBlock,
    calculate_layout,
    pixels_to_points,
)
from src.layout.heights import SOURCE_HEURISTIC, SOURCE_MEASURED, MeasurementError


class TestHeuristicHeights:
    """Tests for the default heuristic."""

    @pytest.mark.parametrize("block,expected_px", [
        (HeaderBlock(name="John Doe"), 150),
        (SectionTitleBlock(title="Education", section="education"), 30),
        (EducationBlock(school="MIT", degree="BSc"), 50),
        (JobBlock(company="Acme"), 80),
        (JobBlock(company="Acme", bullets=("a", "b", "c", "d")), 200),
        (SummaryBlock(text=""), 80),
        (SummaryBlock(text="x" * 80), 100),
        (SummaryBlock(text="x" * 81), 120),
        (SkillsBlock(skills=()), 60),
    ])
    def test_baselines(self, a4_layout, block, expected_px):
        estimator = HeightEstimator(a4_layout)

        assert estimator.heuristic_height_px(block) == pytest.approx(expected_px)

    def test_summary_wraps_every_80_characters(self, a4_layout):
        """Summary height is 80px plus 20px per started 80-character line."""
        text = "y" * 243
        estimator = HeightEstimator(a4_layout)

        height = estimator.estimate(SummaryBlock(text=text))

        assert height.height_px == pytest.approx(80 + math.ceil(243 / 80) * 20)

    def test_skills_wrap_on_joined_text(self, a4_layout, sample_resume):
        """Skills are measured on the bullet-joined string, 116 chars for the sample."""
        block = SkillsBlock(skills=tuple(sample_resume.content.skills))
        estimator = HeightEstimator(a4_layout)

        assert len(block.joined_text) == 116
        assert estimator.heuristic_height_px(block) == pytest.approx(60 + 2 * 20)

    def test_unknown_kind_gets_one_line_height(self, a4_layout):
        """An unrecognized kind is one line of body text (11pt x 1.4)."""
        estimator = HeightEstimator(a4_layout)

        height = estimator.estimate(ContentBlock(kind="divider"))

        assert height.height_pt == pytest.approx(11 * 1.4)
        assert height.height_px == pytest.approx(a4_layout.line_height_px)

    def test_estimates_are_non_negative_and_consistent(self, a4_layout, sample_resume):
        from src.layout import flatten_resume

        estimator = HeightEstimator(a4_layout)
        for block in flatten_resume(sample_resume.content):
            height = estimator.estimate(block)
            assert height.height_px >= 0
            assert height.height_pt == pytest.approx(pixels_to_points(height.height_px), abs=1e-9)

    def test_estimate_is_deterministic(self, a4_layout):
        estimator = HeightEstimator(a4_layout)
        block = SummaryBlock(text="Repeatable " * 20)

        assert estimator.estimate(block) == estimator.estimate(block)


class TestFontScaling:
    """Tests for the optional font-size scaling of heuristic baselines."""

    def test_disabled_by_default(self):
        layout = calculate_layout(ResumeFormat(font_size=22))
        estimator = HeightEstimator(layout)

        assert estimator.font_scale == 1.0
        assert estimator.heuristic_height_px(HeaderBlock()) == 150

    def test_scales_by_font_size_over_11(self):
        layout = calculate_layout(ResumeFormat(font_size=22))
        estimator = HeightEstimator(layout, scale_to_font=True)

        assert estimator.font_scale == pytest.approx(2.0)
        assert estimator.heuristic_height_px(HeaderBlock()) == pytest.approx(300)
        assert estimator.heuristic_height_px(JobBlock(bullets=("a",))) == pytest.approx(220)

    def test_reference_font_size_scales_by_one(self, a4_layout):
        estimator = HeightEstimator(a4_layout, scale_to_font=True)

        assert estimator.font_scale == pytest.approx(1.0)


class TestMeasurer:
    """Tests for the injected measurer and fallback behavior."""

    def test_measured_heights_are_used_for_every_block(self, a4_layout):
        # Arrange
        measurer = MagicMock()
        measurer.measure_block_height.return_value = 42.0
        blocks = [HeaderBlock(), SummaryBlock(text="Hi")]
        estimator = HeightEstimator(a4_layout, measurer=measurer)

        # Act
        result = estimator.estimate_all(blocks)

        # Assert
        assert result.source == SOURCE_MEASURED
        assert [h.height_px for _, h in result.items] == [42.0, 42.0]
        assert result.items[0][1] == HeightEstimate.from_pixels(42.0)
        measurer.measure_block_height.assert_any_call(blocks[0], a4_layout)

    def test_measurer_error_falls_back_for_whole_run(self, a4_layout):
        """One failing block drops every block back to the heuristic."""
        # Arrange
        measurer = MagicMock()
        measurer.measure_block_height.side_effect = [42.0, RuntimeError("detached node")]
        blocks = [HeaderBlock(), SummaryBlock(text=""), EducationBlock()]
        estimator = HeightEstimator(a4_layout, measurer=measurer)

        # Act
        result = estimator.estimate_all(blocks)

        # Assert
        assert result.source == SOURCE_HEURISTIC
        assert [h.height_px for _, h in result.items] == [150, 80, 50]

    @pytest.mark.parametrize("bad_value", [-1.0, float("nan"), float("inf"), None])
    def test_unusable_measurement_falls_back(self, a4_layout, bad_value):
        measurer = MagicMock()
        measurer.measure_block_height.return_value = bad_value
        estimator = HeightEstimator(a4_layout, measurer=measurer)

        result = estimator.estimate_all([HeaderBlock()])

        assert result.source == SOURCE_HEURISTIC
        assert result.items[0][1].height_px == 150

    def test_measure_without_measurer_raises(self, a4_layout):
        estimator = HeightEstimator(a4_layout)

        with pytest.raises(MeasurementError):
            estimator.measure(HeaderBlock())

    def test_no_measurer_uses_heuristic(self, a4_layout):
        result = HeightEstimator(a4_layout).estimate_all([HeaderBlock()])

        assert result.source == SOURCE_HEURISTIC
        assert result.blocks == [HeaderBlock()]
        assert result.total_height_px == 150

    def test_fallback_is_logged(self, a4_layout, caplog):
        measurer = MagicMock()
        measurer.measure_block_height.side_effect = RuntimeError("boom")
        estimator = HeightEstimator(a4_layout, measurer=measurer)

        with caplog.at_level("WARNING", logger="src.layout.heights"):
            estimator.estimate_all([HeaderBlock()])

        assert "using heuristic heights" in caplog.text
