import math
from typing import Dict, List, Optional

from .models import DesignNode, ImageRef, Paint, round_half_up


def first_visible(paints: List[Paint]) -> Optional[Paint]:
    for paint in paints:
        if paint.visible:
            return paint
    return None


def paint_color_css(paint: Paint) -> Optional[str]:
    if paint.color is None:
        return None
    return paint.color.with_alpha(paint.effective_alpha(paint.color)).to_css()


def gradient_stops_css(paint: Paint) -> str:
    stops = []
    for stop in paint.gradient_stops or []:
        color = stop.color.with_alpha(paint.effective_alpha(stop.color))
        position = round_half_up(stop.position * 100)
        stops.append(f'{color.to_css()} {position}%')
    return ', '.join(stops)


def linear_gradient_angle(paint: Paint) -> int:
    start, end = paint.gradient_handle_positions[:2]
    angle = math.atan2(end.y - start.y, end.x - start.x) * (180 / math.pi) + 90
    return round_half_up(angle)


def linear_gradient(paint: Paint) -> str:
    handles = paint.gradient_handle_positions or []
    if not paint.gradient_stops or len(handles) < 2:
        return 'transparent'
    return f'linear-gradient({linear_gradient_angle(paint)}deg, {gradient_stops_css(paint)})'


def radial_gradient(paint: Paint) -> str:
    if not paint.gradient_stops:
        return 'transparent'
    return f'radial-gradient(circle, {gradient_stops_css(paint)})'


def apply_fills(node: DesignNode, styles: Dict[str, str], images: List[ImageRef], class_name: str = ''):
    fill = first_visible(node.fills)
    if fill is None:
        return

    if fill.type == 'SOLID':
        color = paint_color_css(fill)
        if color:
            styles['background-color'] = color

    elif fill.type == 'GRADIENT_LINEAR':
        styles['background'] = linear_gradient(fill)

    elif fill.type == 'GRADIENT_RADIAL':
        styles['background'] = radial_gradient(fill)

    elif fill.type == 'IMAGE':
        image_ref = fill.image_ref or node.image_ref
        if image_ref:
            images.append(ImageRef(node_id=node.id, image_ref=image_ref, class_name=class_name))
            styles['background-size'] = 'contain' if fill.scale_mode == 'FIT' else 'cover'
            styles['background-position'] = 'center'
            styles['background-repeat'] = 'no-repeat'

    # angular/diamond gradients and unknown paints have no background


def apply_strokes(node: DesignNode, styles: Dict[str, str]):
    stroke = first_visible(node.strokes)
    if stroke is None or stroke.type != 'SOLID':
        return

    color = paint_color_css(stroke)
    if color:
        styles['border'] = f'1px solid {color}'
