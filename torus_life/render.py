"""Plain-text frames for the terminal."""

ALIVE_SYMBOL = " o "
DEAD_SYMBOL = " _ "

# Clear screen and move the cursor home, same effect as `clear`.
CLEAR_SEQUENCE = "\033[2J\033[H"


def render_frame(board):
    return "\n".join(
        "".join(ALIVE_SYMBOL if cell else DEAD_SYMBOL for cell in row)
        for row in board
    )


def clear_screen(stream):
    stream.write(CLEAR_SEQUENCE)
