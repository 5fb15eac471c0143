"""ANSI SGR style codes understood by `truenit.utils.write`.

    ## Styles         | ## Foreground     |  ## Background
      0 - Reset       |   30 - Black      |   40 - Black
      1 - Bright      |   31 - Red        |   41 - Red
      2 - Dim         |   32 - Green      |   42 - Green
      4 - Underscore  |   33 - Yellow     |   43 - Yellow
      5 - Blink       |   34 - Blue       |   44 - Blue
      7 - Reverse     |   35 - Magenta    |   45 - Magenta
      8 - Hidden      |   36 - Cyan       |   46 - Cyan
                      |   37 - White      |   47 - White

Several codes can be combined, e.g. ``write("hi", Style.BRIGHT, Style.FG_RED,
Style.BG_RED)``.
"""

from enum import IntEnum


class Style(IntEnum):
    """Select Graphic Rendition codes."""

    RESET = 0
    BRIGHT = 1
    DIM = 2
    UNDERSCORE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47


MIN_CODE = 0
MAX_CODE = 47


def sgr(*codes: int) -> str:
    """Return the escape sequence selecting every code in *codes*, in order."""
    return "".join(f"\x1b[{int(code)}m" for code in codes)


RESET_SEQUENCE = sgr(Style.RESET)
