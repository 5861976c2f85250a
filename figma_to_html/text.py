from typing import Dict

from .models import DesignNode, format_number, px
from .paint import paint_color_css

DEFAULT_FONT_SIZE = 16

TEXT_ALIGN = {
    'LEFT': 'left',
    'RIGHT': 'right',
    'CENTER': 'center',
    'JUSTIFIED': 'justify',
}

TEXT_TRANSFORM = {
    'UPPER': 'uppercase',
    'LOWER': 'lowercase',
    'TITLE': 'capitalize',
}

TEXT_DECORATION = {
    'UNDERLINE': 'underline',
    'STRIKETHROUGH': 'line-through',
}

# (minimum font size, tag), checked top to bottom
HEADING_THRESHOLDS = (
    (32, 'h1'),
    (24, 'h2'),
    (20, 'h3'),
    (18, 'h4'),
    (16, 'h5'),
)


def text_tag(node: DesignNode) -> str:
    font_size = (node.text_style.font_size if node.text_style else None) or DEFAULT_FONT_SIZE
    for threshold, tag in HEADING_THRESHOLDS:
        if font_size >= threshold:
            return tag
    return 'p'


def apply_text_styles(node: DesignNode, styles: Dict[str, str]):
    style = node.text_style
    if style is None:
        return

    if style.font_family:
        styles['font-family'] = f'"{style.font_family}", sans-serif'

    if style.font_size:
        styles['font-size'] = px(style.font_size)

    if style.font_weight:
        styles['font-weight'] = format_number(style.font_weight)

    if style.letter_spacing:
        styles['letter-spacing'] = px(style.letter_spacing)

    if style.line_height_px:
        styles['line-height'] = px(style.line_height_px)

    if style.text_align_horizontal in TEXT_ALIGN:
        styles['text-align'] = TEXT_ALIGN[style.text_align_horizontal]

    if style.text_case in TEXT_TRANSFORM:
        styles['text-transform'] = TEXT_TRANSFORM[style.text_case]

    if style.text_decoration in TEXT_DECORATION:
        styles['text-decoration'] = TEXT_DECORATION[style.text_decoration]

    for fill in node.fills:
        if fill.type == 'SOLID' and fill.visible:
            color = paint_color_css(fill)
            if color:
                styles['color'] = color
            break
