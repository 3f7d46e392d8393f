"""Type hints used in PairFX."""

from typing import Literal, Optional, Tuple

# Chess color string constants (for runtime use)
WHITE = "White"
BLACK = "Black"

# Basically, white or black
Colour = Literal["White", "Black"]

# Finished result tokens, None marks an active game
ResultToken = Literal["1-0", "0-1", "1/2-1/2"]
MaybeResult = Optional[ResultToken]

ColourPreference = Literal[
    "should_be_white",
    "should_be_black",
    "prefers_white",
    "prefers_black",
    "neutral",
]

DisplayMode = Literal["points", "percentage"]

# (white, black) for one board
ColourAssignment = Tuple["Player", "Player"]
MaybePlayer = Optional["Player"]
MaybeMatch = Optional["Match"]
