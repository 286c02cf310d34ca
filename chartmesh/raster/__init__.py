from .canvas import draw_hline, draw_vline, fill_rows, new_canvas
from .draw_lines import draw_line
from .draw_text import draw_text, text_size

__all__ = [
    "draw_hline",
    "draw_line",
    "draw_text",
    "draw_vline",
    "fill_rows",
    "new_canvas",
    "text_size",
]
