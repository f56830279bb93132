"""Tests for visualization utilities."""

import matplotlib
import pytest

# Use non-interactive backend for testing
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from motion_segment import SegmentShape
from motion_segment.presets import create_example_segment
from motion_segment.visualize import plot_segment, plot_shape_comparison


class TestPlotSegment:
    """Test plot_segment function."""

    @pytest.fixture
    def segment(self):
        """Reference S-curve segment."""
        return create_example_segment(SegmentShape.S_CURVE)

    def test_plot_segment_creates_figure(self, segment):
        fig = plot_segment(segment, show=False)
        assert isinstance(fig, plt.Figure)
        plt.close(fig)

    def test_plot_segment_has_four_subplots(self, segment):
        fig = plot_segment(segment, show=False)
        assert len(fig.axes) == 4
        assert [ax.get_ylabel() for ax in fig.axes] == [
            "Position",
            "Velocity",
            "Acceleration",
            "Jerk",
        ]
        plt.close(fig)

    def test_plot_segment_default_title_names_shape(self, segment):
        fig = plot_segment(segment, show=False)
        assert "S-Curve" in fig._suptitle.get_text()
        plt.close(fig)

    def test_plot_segment_with_custom_title(self, segment):
        fig = plot_segment(segment, title="My Custom Title", show=False)
        assert "My Custom Title" in fig._suptitle.get_text()
        plt.close(fig)

    def test_plot_segment_sample_count(self, segment):
        fig = plot_segment(segment, show=False, num_points=25)
        line = fig.axes[0].get_lines()[0]
        assert len(line.get_xdata()) == 25
        plt.close(fig)

    def test_plot_segment_saves_file(self, segment, tmp_path):
        save_path = tmp_path / "s_curve.png"
        fig = plot_segment(segment, show=False, save_path=str(save_path))
        assert save_path.exists()
        plt.close(fig)


class TestPlotShapeComparison:
    """Test plot_shape_comparison function."""

    @pytest.fixture
    def segments(self):
        return {shape.value: create_example_segment(shape) for shape in SegmentShape}

    def test_plot_comparison_creates_single_panel(self, segments):
        fig = plot_shape_comparison(segments, show=False)
        assert len(fig.axes) == 1
        assert len(fig.axes[0].get_lines()) == len(segments)
        plt.close(fig)

    def test_plot_comparison_legend_labels(self, segments):
        fig = plot_shape_comparison(segments, quantity="acceleration", show=False)
        labels = [text.get_text() for text in fig.axes[0].get_legend().get_texts()]
        assert labels == list(segments)
        assert fig.axes[0].get_ylabel() == "Acceleration"
        plt.close(fig)

    def test_plot_comparison_empty_segments_raises_error(self):
        with pytest.raises(ValueError, match="Cannot plot empty segment collection"):
            plot_shape_comparison({}, show=False)

    def test_plot_comparison_unknown_quantity_raises_error(self, segments):
        with pytest.raises(ValueError, match="Unknown quantity"):
            plot_shape_comparison(segments, quantity="snap", show=False)
