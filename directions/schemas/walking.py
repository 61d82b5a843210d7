from typing import Optional

from pydantic import BaseModel, ConfigDict


class WalkingOptions(BaseModel):
    """Tuning values for the walking profile."""

    walking_speed: Optional[float] = None
    walkway_bias: Optional[float] = None
    alley_bias: Optional[float] = None

    model_config = ConfigDict(frozen=True)
