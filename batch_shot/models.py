from enum import Enum
import math
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_TRIM = 8
MAX_TRIM = 200


class NameMode(str, Enum):
    title = "title"
    url = "url"


class RunConfig(BaseModel):
    """Options for a single batch run, validated once before any work starts."""

    model_config = ConfigDict(frozen=True)

    source: Path
    name: NameMode = NameMode.title
    width: int = Field(1024, ge=1)
    height: Optional[int] = Field(None, ge=1)
    trim: int = Field(MAX_TRIM, ge=MIN_TRIM, le=MAX_TRIM)
    delay: float = Field(0, ge=0, description="milliseconds between urls")
    output: Path = Path(".")

    @property
    def viewport_height(self) -> int:
        """Explicit height, or 75% of the width rounded down."""
        if self.height is not None:
            return self.height
        return math.floor(self.width * 0.75)

    @property
    def viewport(self) -> dict:
        return {"width": self.width, "height": self.viewport_height}


class ScreenshotResult(BaseModel):
    index: int
    url: str
    success: bool
    filename: Optional[str] = None


class RunSummary(BaseModel):
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    elapsed: float = 0.0

    def record(self, result: ScreenshotResult) -> None:
        if result.success:
            self.succeeded += 1
        else:
            self.failed += 1

    @property
    def processed(self) -> int:
        return self.succeeded + self.failed


def format_elapsed(seconds: float) -> str:
    """Render a duration as ``1m 2.5s``, dropping the minutes when zero."""
    minutes, rest = divmod(seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {rest:.1f}s"
    return f"{rest:.1f}s"
