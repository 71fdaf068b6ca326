"""Option identity and color assignment for Level 2.

Colors come from a fixed palette through a single rotating cursor that is
shared by every column the registry serves. The cursor is never reset
between columns, so a color depends on the global order in which options
are minted. Create one registry per conversion run for reproducible colors,
or share one across runs to continue the rotation.
"""

from typing import Iterable, Optional

from utils import IdGenerator, get_logger

from .models import Option

logger = get_logger(__name__)

# The palette deliberately leaves out the default color
OPTION_COLORS = (
    "propColorGray",
    "propColorBrown",
    "propColorOrange",
    "propColorYellow",
    "propColorGreen",
    "propColorBlue",
    "propColorPurple",
    "propColorPink",
    "propColorRed",
)


class OptionRegistry:
    """Mints options with unique ids and round-robin colors.

    Args:
        id_generator: Identifier collaborator (uuid4 by default)
        palette: Ordered colors to rotate through
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        palette: tuple[str, ...] = OPTION_COLORS,
    ):
        if not palette:
            raise ValueError("palette must contain at least one color")
        self.id_generator = id_generator or IdGenerator()
        self.palette = tuple(palette)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Palette index the next option will be colored with."""
        return self._cursor

    def reset(self) -> None:
        """Restart the color rotation at the first palette entry."""
        self._cursor = 0

    def next_color(self) -> str:
        """Return the current color and advance the cursor."""
        color = self.palette[self._cursor % len(self.palette)]
        self._cursor = (self._cursor + 1) % len(self.palette)
        return color

    def mint(self, value: str) -> Option:
        """Create one option for a raw value."""
        return Option(id=self.id_generator.new_id(), value=value, color=self.next_color())

    def register_options(self, distinct_values: Iterable[str]) -> list[Option]:
        """Mint options for a column's distinct values, keeping their order.

        Repeated values are ignored, so every option value is unique within
        the returned list.
        """
        options = [self.mint(value) for value in dict.fromkeys(distinct_values)]
        logger.debug(f"Registered {len(options)} options, color cursor at {self._cursor}")
        return options
