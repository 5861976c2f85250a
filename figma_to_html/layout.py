from typing import Dict, Optional

from .models import ConversionOptions, DesignNode, NodeType, format_number, px, round_half_up

JUSTIFY_CONTENT = {
    'MIN': 'flex-start',
    'MAX': 'flex-end',
    'CENTER': 'center',
    'SPACE_BETWEEN': 'space-between',
}

ALIGN_ITEMS = {
    'MIN': 'flex-start',
    'MAX': 'flex-end',
    'CENTER': 'center',
    'BASELINE': 'baseline',
}


def apply_base_styles(node: DesignNode, styles: Dict[str, str], options: ConversionOptions):
    """Dimensions, opacity and corner radius.

    Explicit dimensions are skipped for auto-layout nodes while auto-layout is
    preserved; their size comes from the flex box instead.
    """
    bbox = node.bounding_box
    if bbox is not None:
        if not options.preserve_auto_layout or not node.has_auto_layout:
            styles['width'] = f'{round_half_up(bbox.width)}px'
            styles['height'] = f'{round_half_up(bbox.height)}px'

    if node.opacity is not None and node.opacity < 1:
        styles['opacity'] = f'{node.opacity:.2f}'

    if node.corner_radius:
        styles['border-radius'] = px(node.corner_radius)
    elif node.corner_radii and len(node.corner_radii) == 4:
        styles['border-radius'] = ' '.join(px(radius) for radius in node.corner_radii)

    if node.type is NodeType.ELLIPSE:
        styles['border-radius'] = '50%'


def padding_shorthand(node: DesignNode) -> Optional[str]:
    padding = []
    for side in (node.padding_top, node.padding_right, node.padding_bottom, node.padding_left):
        if side:
            padding.append(px(side))

    if not padding:
        return None
    if len(set(padding)) == 1:
        return padding[0]
    if len(padding) == 4:
        return ' '.join(padding)
    return None


def apply_layout_styles(node: DesignNode, styles: Dict[str, str], options: ConversionOptions):
    if not node.has_auto_layout or not options.use_flexbox:
        return

    horizontal = node.layout_mode == 'HORIZONTAL'

    styles['display'] = 'flex'
    styles['flex-direction'] = 'row' if horizontal else 'column'

    if node.item_spacing:
        styles['gap'] = px(node.item_spacing)

    padding = padding_shorthand(node)
    if padding:
        styles['padding'] = padding

    if node.primary_axis_align_items in JUSTIFY_CONTENT:
        styles['justify-content'] = JUSTIFY_CONTENT[node.primary_axis_align_items]

    if node.counter_axis_align_items in ALIGN_ITEMS:
        styles['align-items'] = ALIGN_ITEMS[node.counter_axis_align_items]

    if node.primary_axis_sizing_mode == 'AUTO':
        styles['width' if horizontal else 'height'] = 'auto'

    if node.counter_axis_sizing_mode == 'AUTO':
        styles['height' if horizontal else 'width'] = 'auto'

    if node.layout_grow and node.layout_grow > 0:
        styles['flex-grow'] = format_number(node.layout_grow)
