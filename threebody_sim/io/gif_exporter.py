"""GIF export functionality."""

import numpy as np
from typing import Iterable, Optional
from threebody_sim.errors import RenderingFailure


class GIFExporter:
    """Stream rendered frames into an animated GIF."""

    def __init__(self, output_path: str, fps: int = 60, duration: Optional[float] = None):
        """Initialize GIF exporter.

        Args:
            output_path: Output file path (.gif)
            fps: Frames per second (used if duration is None)
            duration: Frame duration in seconds (overrides fps)
        """
        self.output_path = output_path
        self.fps = fps
        self.duration = duration if duration is not None else (1.0 / fps)
        self.frame_count = 0

    @property
    def duration_ms(self) -> float:
        """Frame duration as imageio's pillow writer expects it."""
        return self.duration * 1000.0

    def export(self, frames: Iterable[np.ndarray]) -> int:
        """Write ``frames`` to the GIF file one at a time.

        Frames are (H, W, 3) arrays, either uint8 or floats in [0, 1].

        Returns:
            Number of frames written
        """
        try:
            import imageio.v2 as imageio
        except ImportError:
            raise ImportError(
                "GIF export requires imageio>=2.28. Install with: pip install imageio"
            )

        self.frame_count = 0
        try:
            with imageio.get_writer(self.output_path, mode="I", duration=self.duration_ms, loop=0) as writer:
                for frame in frames:
                    if frame.dtype != np.uint8:
                        # Normalize to 0-255
                        frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)
                    writer.append_data(frame)
                    self.frame_count += 1
        except (OSError, ValueError) as exc:
            raise RenderingFailure(f"Could not write GIF to {self.output_path}: {exc}") from exc

        if self.frame_count == 0:
            raise RenderingFailure("No frames to export")
        return self.frame_count
