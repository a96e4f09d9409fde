"""2D trajectory rasterizer.

Simulation coordinates map to pixels as ``round(coordinate * scale)`` around
the canvas centre, with the y axis pointing up.

Markers are written straight into a numpy (H, W, 3) uint8 canvas rather than
drawn through a matplotlib figure, so every marker lands on exactly that
pixel. matplotlib is still used to resolve color names and, in
:mod:`threebody_sim.io.image_io`, to write the image.
"""

from typing import Iterable, Iterator, Optional, Tuple
import math
import numpy as np
from matplotlib.colors import to_rgb
from threebody_sim.errors import RenderingFailure
from threebody_sim.physics.body import Snapshot

BODY_COLORS = ("red", "green", "blue")
FALLBACK_COLOR = "gray"
INITIAL_MARKER_COLOR = "black"
BACKGROUND_COLOR = "white"
GRID_COLOR = "gainsboro"
AXIS_COLOR = "darkgray"

RGB = Tuple[int, int, int]


def rgb8(color: str) -> RGB:
    """Resolve a matplotlib color spec to 8-bit RGB."""
    r, g, b = to_rgb(color)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def body_color(index: int) -> str:
    """Trace color of body ``index``."""
    if 0 <= index < len(BODY_COLORS):
        return BODY_COLORS[index]
    return FALLBACK_COLOR


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class TrajectoryRenderer:
    """Draws body position histories onto a fixed pixel canvas."""

    def __init__(
        self,
        width: int = 250,
        height: int = 255,
        scale: float = 100.0,
        marker_radius: int = 1,
        initial_marker_radius: int = 3,
        grid_spacing: int = 25,
    ):
        """Initialize renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            scale: Pixels per simulation length unit
            marker_radius: Radius of trajectory markers
            initial_marker_radius: Radius of initial-position markers
            grid_spacing: Background grid spacing in pixels (0 disables the grid)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if not math.isfinite(scale) or scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        if marker_radius < 0 or initial_marker_radius < 0 or grid_spacing < 0:
            raise ValueError("Marker radii and grid spacing must be non-negative")
        self.width = width
        self.height = height
        self.scale = scale
        self.marker_radius = marker_radius
        self.initial_marker_radius = initial_marker_radius
        self.grid_spacing = grid_spacing
        self.clipped_count = 0

    @property
    def origin(self) -> Tuple[int, int]:
        """(row, col) of the simulation origin."""
        return self.height // 2, self.width // 2

    def to_pixel(self, x: float, y: float) -> Tuple[int, int]:
        """Map simulation coordinates to canvas (row, col).

        The result may lie outside the canvas; drawing clips it.

        Raises:
            RenderingFailure: if a coordinate is not finite
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise RenderingFailure(f"Cannot map non-finite coordinates ({x}, {y}) to pixels")
        row0, col0 = self.origin
        return row0 - round_half_away(y * self.scale), col0 + round_half_away(x * self.scale)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def blank_canvas(self) -> np.ndarray:
        canvas = np.empty((self.height, self.width, 3), dtype=np.uint8)
        canvas[:, :] = rgb8(BACKGROUND_COLOR)
        return canvas

    def draw_background(self, canvas: Optional[np.ndarray] = None) -> np.ndarray:
        """Paint the Cartesian grid and the axes through the origin."""
        if canvas is None:
            canvas = self.blank_canvas()
        row0, col0 = self.origin
        if self.grid_spacing > 0:
            grid = rgb8(GRID_COLOR)
            canvas[row0 % self.grid_spacing::self.grid_spacing, :] = grid
            canvas[:, col0 % self.grid_spacing::self.grid_spacing] = grid
        axis = rgb8(AXIS_COLOR)
        canvas[row0, :] = axis
        canvas[:, col0] = axis
        return canvas

    def draw_marker(self, canvas: np.ndarray, x: float, y: float, color: str, radius: int) -> bool:
        """Draw a filled disc centred on simulation point (x, y).

        Returns:
            False if the centre falls outside the canvas and nothing was drawn
        """
        row, col = self.to_pixel(x, y)
        if not self.in_bounds(row, col):
            self.clipped_count += 1
            return False
        rgb = rgb8(color)
        r0, r1 = max(row - radius, 0), min(row + radius, self.height - 1)
        c0, c1 = max(col - radius, 0), min(col + radius, self.width - 1)
        rows, cols = np.ogrid[r0:r1 + 1, c0:c1 + 1]
        mask = (rows - row) ** 2 + (cols - col) ** 2 <= radius * radius
        canvas[r0:r1 + 1, c0:c1 + 1][mask] = rgb
        return True

    def draw_snapshot(self, canvas: np.ndarray, snapshot: Snapshot):
        for index in range(snapshot.n_bodies):
            x, y = snapshot.position(index)
            self.draw_marker(canvas, x, y, body_color(index), self.marker_radius)

    def draw_initial_positions(self, canvas: np.ndarray, initial_positions):
        for x, y in np.asarray(initial_positions, dtype=np.float64).reshape(-1, 2):
            self.draw_marker(canvas, float(x), float(y), INITIAL_MARKER_COLOR, self.initial_marker_radius)

    def render(self, snapshots: Iterable[Snapshot], initial_positions=None) -> np.ndarray:
        """Render every snapshot onto a fresh canvas.

        Args:
            snapshots: Snapshots to draw, in step order
            initial_positions: Optional (n, 2) starting positions, drawn on top

        Returns:
            Image array (H, W, 3) uint8
        """
        self.clipped_count = 0
        canvas = self.draw_background()
        for snapshot in snapshots:
            self.draw_snapshot(canvas, snapshot)
        if initial_positions is not None:
            self.draw_initial_positions(canvas, initial_positions)
        return canvas

    def frames(self, snapshots: Iterable[Snapshot], initial_positions=None) -> Iterator[np.ndarray]:
        """Yield one cumulative frame per snapshot."""
        self.clipped_count = 0
        trace = self.draw_background()
        for snapshot in snapshots:
            self.draw_snapshot(trace, snapshot)
            frame = trace.copy()
            if initial_positions is not None:
                self.draw_initial_positions(frame, initial_positions)
            yield frame
