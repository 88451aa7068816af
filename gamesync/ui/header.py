"""
Application header.

Title banner with a horizontal gradient and the version.
"""

from .colors import Colors, rgb

TITLE = "=== Game Sync - engine launcher ==="

GRADIENT_START = (99, 102, 241)
GRADIENT_END = (244, 114, 182)


def get_gradient_color(pos: float) -> tuple:
    """Color at pos (0.0-1.0) between GRADIENT_START and GRADIENT_END."""
    pos = max(0.0, min(1.0, pos))
    return tuple(
        int(start + (end - start) * pos)
        for start, end in zip(GRADIENT_START, GRADIENT_END)
    )


def print_header():
    """Print the title with gradient coloring and version."""
    from gamesync import __version__

    result = []
    for col, char in enumerate(TITLE):
        if char != ' ':
            r, g, b = get_gradient_color(col / len(TITLE))
            result.append(f"{rgb(r, g, b)}{char}")
        else:
            result.append(char)
    print(''.join(result) + Colors.RESET)
    print(f" {Colors.DIM}v{__version__}{Colors.RESET}")
    print()
