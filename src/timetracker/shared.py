from textual.widget import Widget

# Slot n is toggled by SLOT_KEYS[n - 1].
SLOT_KEYS = '1234567890abcdefghij'

QUIT_KEY = 'q'
SAVE_KEY = 's'
ZERO_ALL_KEY = 'z'

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
