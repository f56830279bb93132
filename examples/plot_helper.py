"""Helper functions for creating matplotlib plots in examples."""

import os
from typing import Optional

from motion_segment import MotionSegment
from motion_segment.visualize import plot_segment


def save_segment_plot(
    segment: MotionSegment,
    filename: str,
    title: Optional[str] = None,
) -> None:
    """Save a four-panel segment plot to file.

    Args:
        segment: Segment to plot
        filename: Output filename (e.g., "my_plot.png")
        title: Optional custom title
    """
    if not filename.endswith((".png", ".jpg", ".pdf")):
        filename += ".png"

    plot_segment(segment, title=title, show=False, save_path=filename)
    print(f"  Plot saved: {filename}")


def generate_example_plot(
    name: str,
    segment: MotionSegment,
    output_dir: Optional[str] = None,
) -> None:
    """Generate and save a plot with automatic naming.

    Args:
        name: Base name for the plot (e.g., "s_curve")
        segment: Segment to plot
        output_dir: Optional output directory (defaults to caller's directory)
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        caller_file = caller_frame.filename
        output_dir = os.path.dirname(os.path.abspath(caller_file))

    filename = os.path.join(output_dir, f"{name}_plot.png")
    title = f"{name.replace('_', ' ').title()} Segment: Position, Velocity, Acceleration, Jerk"

    save_segment_plot(segment, filename=filename, title=title)
