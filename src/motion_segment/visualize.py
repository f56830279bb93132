"""Visualization utilities for motion segments.

This module plots position, velocity, acceleration and jerk curves of
sampled segments with matplotlib.
"""

from typing import Dict, Optional

import matplotlib.pyplot as plt

from motion_segment.segment import DEFAULT_SAMPLE_POINTS, MotionSegment

# Quantity name -> (index into MotionSegment.sample output, axis label)
QUANTITIES = {
    "position": (1, "Position"),
    "velocity": (2, "Velocity"),
    "acceleration": (3, "Acceleration"),
    "jerk": (4, "Jerk"),
}


def _finish(fig: plt.Figure, show: bool, save_path: Optional[str]) -> plt.Figure:
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_segment(
    segment: MotionSegment,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
    num_points: int = DEFAULT_SAMPLE_POINTS,
) -> plt.Figure:
    """Plot all four motion quantities of a segment.

    Creates a four-panel figure sharing the time axis:
    - Position over time
    - Velocity over time
    - Acceleration over time
    - Jerk over time

    Args:
        segment: Segment to plot
        title: Optional custom title (default: auto-generated from the shape)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure
        num_points: Number of samples across the segment

    Returns:
        matplotlib Figure object

    Example:
        >>> from motion_segment import SegmentShape
        >>> from motion_segment.presets import create_example_segment
        >>> seg = create_example_segment(SegmentShape.S_CURVE)
        >>> fig = plot_segment(seg, show=False)
    """
    samples = segment.sample(num_points)
    times = samples[0]

    fig, axes = plt.subplots(4, 1, figsize=(12, 10), sharex=True)

    if title is None:
        title = (
            f"{segment.shape.value.title()} Segment\n"
            f"Distance: {segment.distance:g} over {segment.duration:g} s | "
            f"v0={segment.v0:g}, vf={segment.vf:g}"
        )
    fig.suptitle(title, fontsize=14, fontweight="bold")

    for ax, (index, label) in zip(axes, QUANTITIES.values()):
        ax.plot(times, samples[index], linewidth=2, label=label)
        ax.set_ylabel(label)
        ax.set_title(f"{label} vs Time")
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel("Time (seconds)")

    return _finish(fig, show, save_path)


def plot_shape_comparison(
    segments: Dict[str, MotionSegment],
    quantity: str = "velocity",
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
    num_points: int = DEFAULT_SAMPLE_POINTS,
) -> plt.Figure:
    """Overlay one quantity of several labelled segments (single panel).

    Args:
        segments: Mapping of legend label to segment
        quantity: One of "position", "velocity", "acceleration", "jerk"
        title: Plot title (default: auto-generated from the quantity)
        show: Whether to display the plot
        save_path: Optional path to save the figure
        num_points: Number of samples per segment

    Returns:
        matplotlib Figure object
    """
    if not segments:
        raise ValueError("Cannot plot empty segment collection")
    if quantity not in QUANTITIES:
        raise ValueError(
            f"Unknown quantity {quantity!r}, expected one of {', '.join(QUANTITIES)}"
        )

    index, label = QUANTITIES[quantity]

    fig, ax = plt.subplots(figsize=(12, 4))
    for name, segment in segments.items():
        samples = segment.sample(num_points)
        ax.plot(samples[0], samples[index], linewidth=2, label=name)
    ax.set_xlabel("Time (seconds)")
    ax.set_ylabel(label)
    ax.set_title(title or f"{label} by Segment Shape")
    ax.legend()
    ax.grid(True, alpha=0.3)

    return _finish(fig, show, save_path)
