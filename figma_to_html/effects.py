from typing import Dict

from .models import DesignNode, Effect, px

DEFAULT_SHADOW_COLOR = 'rgba(0,0,0,0.25)'

SHADOW_TYPES = ('DROP_SHADOW', 'INNER_SHADOW')
BLUR_TYPES = ('LAYER_BLUR', 'BACKGROUND_BLUR')


def shadow_term(effect: Effect) -> str:
    offset_x = effect.offset.x if effect.offset else 0
    offset_y = effect.offset.y if effect.offset else 0
    radius = effect.radius or 0
    spread = effect.spread or 0
    color = effect.color.to_css() if effect.color else DEFAULT_SHADOW_COLOR
    inset = 'inset ' if effect.type == 'INNER_SHADOW' else ''
    return f'{inset}{px(offset_x)} {px(offset_y)} {px(radius)} {px(spread)} {color}'


def apply_effects(node: DesignNode, styles: Dict[str, str]):
    shadows = []
    blur = 0

    for effect in node.effects:
        if not effect.visible:
            continue

        if effect.type in SHADOW_TYPES:
            shadows.append(shadow_term(effect))

        elif effect.type in BLUR_TYPES:
            # layer and background blur share one filter, largest radius wins
            blur = max(blur, effect.radius or 0)

    if shadows:
        styles['box-shadow'] = ', '.join(shadows)

    if blur > 0:
        styles['filter'] = f'blur({px(blur)})'
