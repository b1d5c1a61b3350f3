"""
geometry.py: Scaled sprite sizes shared by the simulation and the renderer.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import SIZE, DEFAULT_ASSET_SIZES, FLAP_FRAME_SIZE

Size = Tuple[int, int]


@dataclass(frozen=True)
class WorldGeometry:
    """
    Canvas size plus every sprite box size, already multiplied by the
    distortion factor (canvas size over background height).
    """
    size: int
    distortion: int
    background: Size
    floor: Size
    pipe: Size
    flappy: Size
    tap_to_start: Size

    @classmethod
    def from_sizes(cls, sizes: Dict[str, Size], flappy_frame: Size = FLAP_FRAME_SIZE,
                   size: int = SIZE) -> "WorldGeometry":
        """Builds the geometry from unscaled image sizes keyed by logical asset name."""
        distortion = size // sizes["background"][1]

        def scaled(dims: Size) -> Size:
            return dims[0] * distortion, dims[1] * distortion

        return cls(
            size=size,
            distortion=distortion,
            background=scaled(sizes["background"]),
            floor=scaled(sizes["floor"]),
            pipe=scaled(sizes["top_pipe"]),
            flappy=scaled(flappy_frame),
            tap_to_start=scaled(sizes["tap_to_start"]),
        )

    @classmethod
    def default(cls, size: int = SIZE) -> "WorldGeometry":
        """Geometry of the stock asset set, for running without images."""
        return cls.from_sizes(DEFAULT_ASSET_SIZES, size=size)
