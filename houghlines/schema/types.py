# pydantic models: HoughParams, DetectedLine
from pydantic import BaseModel, Field
from typing import Literal, Optional, Tuple

Point = Tuple[int, int]
Segment = Tuple[Point, Point]

class HoughParams(BaseModel):
    theta_axis_scale_factor: int = Field(1, ge=1)
    rho_axis_scale_factor: int = Field(1, ge=1)
    houghspace_filter_threshold: int = Field(0, ge=0)
    edge_mode: Literal["dark", "contrast"] = "dark"
    edge_threshold: int = Field(1, ge=0)   # dark mode: intensity must be below this
    min_contrast: int = Field(85, ge=0)    # contrast mode: neighbour difference
    strict_clipping: bool = False

    @property
    def theta_axis_size(self) -> int:
        return self.theta_axis_scale_factor * 180

class DetectedLine(BaseModel):
    theta: int                  # bin on the (possibly oversampled) theta axis
    theta_degrees: int          # descaled to [0, 180]
    rho_bin: int
    rho: float
    votes: int
    segment: Segment            # reconstructed, bottom-up coordinates
    clipped: Optional[Segment] = None
