"""Session settings."""

from pydantic import BaseModel, Field

from ..execution.change import MarkingPalette

ELEMENT_SIZE = 5
DEFAULT_REFRESH_TEXT = (
    "Overall description of choosen algorithm or current step of its "
    "execution will appear here"
)


class Settings(BaseModel):
    """Rendering defaults and randomness for a session."""

    element_size: int = Field(default=ELEMENT_SIZE, gt=0)
    start_color: str = "blue"
    end_color: str = "red"
    palette: MarkingPalette = Field(default_factory=MarkingPalette)
    refresh_text: str = DEFAULT_REFRESH_TEXT
    seed: int | None = None
