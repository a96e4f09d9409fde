"""Still image output."""

from pathlib import Path
import numpy as np
from matplotlib.image import imsave
from threebody_sim.errors import RenderingFailure


def save_image(image: np.ndarray, output_path: str) -> Path:
    """Write an (H, W, 3) uint8 image to disk.

    The format follows the file suffix (``.png`` if there is none).

    Args:
        image: Image array
        output_path: Output file path

    Returns:
        Path that was written

    Raises:
        RenderingFailure: if the image is malformed or cannot be written
    """
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3 or image.dtype != np.uint8:
        raise RenderingFailure(f"Expected an (H, W, 3) uint8 image, got {image.shape} {image.dtype}")

    output_path = Path(output_path)
    if not output_path.suffix:
        output_path = output_path.with_suffix(".png")

    try:
        imsave(output_path, image)
    # Pillow reports unknown formats as KeyError
    except (OSError, ValueError, KeyError) as exc:
        raise RenderingFailure(f"Could not write image to {output_path}: {exc}") from exc
    return output_path
