import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Union


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px(value: Union[int, float]) -> str:
    return f'{format_number(value)}px'


class NodeType(Enum):
    FRAME = 'FRAME'
    GROUP = 'GROUP'
    COMPONENT = 'COMPONENT'
    COMPONENT_SET = 'COMPONENT_SET'
    INSTANCE = 'INSTANCE'
    TEXT = 'TEXT'
    RECTANGLE = 'RECTANGLE'
    ELLIPSE = 'ELLIPSE'
    VECTOR = 'VECTOR'
    LINE = 'LINE'
    POLYGON = 'POLYGON'
    STAR = 'STAR'
    OTHER = 'OTHER'

    @classmethod
    def parse(cls, raw: Optional[str]) -> 'NodeType':
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> 'Color':
        return Color(self.r, self.g, self.b, alpha)

    def to_css(self) -> str:
        r = round_half_up(self.r * 255)
        g = round_half_up(self.g * 255)
        b = round_half_up(self.b * 255)
        if self.a == 1:
            return f'rgb({r}, {g}, {b})'
        return f'rgba({r}, {g}, {b}, {self.a:.2f})'

    @classmethod
    def from_figma(cls, color_dict: Dict) -> 'Color':
        return cls(
            r=color_dict.get('r', 0),
            g=color_dict.get('g', 0),
            b=color_dict.get('b', 0),
            a=color_dict.get('a', 1.0)
        )


@dataclass
class Vector:
    x: float = 0
    y: float = 0

    @classmethod
    def from_figma(cls, data: Dict) -> 'Vector':
        return cls(x=data.get('x', 0), y=data.get('y', 0))


@dataclass
class BoundingBox:
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @classmethod
    def from_figma(cls, data: Dict) -> 'BoundingBox':
        return cls(
            x=data.get('x', 0),
            y=data.get('y', 0),
            width=data.get('width', 0),
            height=data.get('height', 0)
        )


@dataclass
class GradientStop:
    position: float
    color: Color

    @classmethod
    def from_figma(cls, data: Dict) -> 'GradientStop':
        return cls(
            position=data.get('position', 0),
            color=Color.from_figma(data.get('color', {}))
        )


@dataclass
class Paint:
    type: str
    visible: bool = True
    opacity: Optional[float] = None
    color: Optional[Color] = None
    gradient_stops: Optional[List[GradientStop]] = None
    gradient_handle_positions: Optional[List[Vector]] = None
    image_ref: Optional[str] = None
    scale_mode: Optional[str] = None

    def effective_alpha(self, color: Color) -> float:
        opacity = 1 if self.opacity is None else self.opacity
        return opacity * color.a

    @classmethod
    def from_figma(cls, data: Dict) -> 'Paint':
        color = data.get('color')
        stops = data.get('gradientStops')
        handles = data.get('gradientHandlePositions')
        return cls(
            type=data.get('type', ''),
            visible=data.get('visible', True),
            opacity=data.get('opacity'),
            color=Color.from_figma(color) if color is not None else None,
            gradient_stops=[GradientStop.from_figma(s) for s in stops] if stops is not None else None,
            gradient_handle_positions=[Vector.from_figma(h) for h in handles] if handles is not None else None,
            image_ref=data.get('imageRef'),
            scale_mode=data.get('scaleMode')
        )


@dataclass
class Effect:
    type: str
    visible: bool = True
    radius: Optional[float] = None
    color: Optional[Color] = None
    offset: Optional[Vector] = None
    spread: Optional[float] = None

    @classmethod
    def from_figma(cls, data: Dict) -> 'Effect':
        color = data.get('color')
        offset = data.get('offset')
        return cls(
            type=data.get('type', ''),
            visible=data.get('visible', True),
            radius=data.get('radius'),
            color=Color.from_figma(color) if color is not None else None,
            offset=Vector.from_figma(offset) if offset is not None else None,
            spread=data.get('spread')
        )


@dataclass
class TextStyle:
    font_family: Optional[str] = None
    font_weight: Optional[float] = None
    font_size: Optional[float] = None
    text_align_horizontal: Optional[str] = None
    letter_spacing: Optional[float] = None
    line_height_px: Optional[float] = None
    text_case: Optional[str] = None
    text_decoration: Optional[str] = None

    @classmethod
    def from_figma(cls, data: Dict) -> 'TextStyle':
        return cls(
            font_family=data.get('fontFamily'),
            font_weight=data.get('fontWeight'),
            font_size=data.get('fontSize'),
            text_align_horizontal=data.get('textAlignHorizontal'),
            letter_spacing=data.get('letterSpacing'),
            line_height_px=data.get('lineHeightPx'),
            text_case=data.get('textCase'),
            text_decoration=data.get('textDecoration')
        )


@dataclass
class DesignNode:
    id: str
    name: str
    type: NodeType
    raw_type: str = ''
    children: List['DesignNode'] = field(default_factory=list)
    bounding_box: Optional[BoundingBox] = None
    fills: List[Paint] = field(default_factory=list)
    strokes: List[Paint] = field(default_factory=list)
    effects: List[Effect] = field(default_factory=list)
    corner_radius: Optional[float] = None
    corner_radii: Optional[List[float]] = None
    opacity: Optional[float] = None
    layout_mode: Optional[str] = None
    primary_axis_sizing_mode: Optional[str] = None
    counter_axis_sizing_mode: Optional[str] = None
    primary_axis_align_items: Optional[str] = None
    counter_axis_align_items: Optional[str] = None
    padding_top: Optional[float] = None
    padding_right: Optional[float] = None
    padding_bottom: Optional[float] = None
    padding_left: Optional[float] = None
    item_spacing: Optional[float] = None
    layout_grow: Optional[float] = None
    characters: Optional[str] = None
    text_style: Optional[TextStyle] = None
    image_ref: Optional[str] = None

    @property
    def has_auto_layout(self) -> bool:
        return bool(self.layout_mode) and self.layout_mode != 'NONE'

    @classmethod
    def from_figma(cls, node: Dict) -> 'DesignNode':
        raw_type = node.get('type', '')
        bbox = node.get('absoluteBoundingBox') or node.get('boundingBox')
        style = node.get('style') or node.get('textStyle')
        radii = node.get('rectangleCornerRadii') or node.get('cornerRadii')

        return cls(
            id=node.get('id', ''),
            name=node.get('name', ''),
            type=NodeType.parse(raw_type),
            raw_type=raw_type,
            children=[cls.from_figma(child) for child in node.get('children') or []],
            bounding_box=BoundingBox.from_figma(bbox) if bbox else None,
            fills=[Paint.from_figma(f) for f in node.get('fills') or []],
            strokes=[Paint.from_figma(s) for s in node.get('strokes') or []],
            effects=[Effect.from_figma(e) for e in node.get('effects') or []],
            corner_radius=node.get('cornerRadius'),
            corner_radii=list(radii) if radii else None,
            opacity=node.get('opacity'),
            layout_mode=node.get('layoutMode'),
            primary_axis_sizing_mode=node.get('primaryAxisSizingMode'),
            counter_axis_sizing_mode=node.get('counterAxisSizingMode'),
            primary_axis_align_items=node.get('primaryAxisAlignItems'),
            counter_axis_align_items=node.get('counterAxisAlignItems'),
            padding_top=node.get('paddingTop'),
            padding_right=node.get('paddingRight'),
            padding_bottom=node.get('paddingBottom'),
            padding_left=node.get('paddingLeft'),
            item_spacing=node.get('itemSpacing'),
            layout_grow=node.get('layoutGrow'),
            characters=node.get('characters'),
            text_style=TextStyle.from_figma(style) if style else None,
            image_ref=node.get('imageRef')
        )


_OPTION_ALIASES = {
    'preserveAutoLayout': 'preserve_auto_layout',
    'convertEffects': 'convert_effects',
    'importVariants': 'import_variants',
    'useFlexbox': 'use_flexbox',
    'generateTailwind': 'generate_tailwind',
}


@dataclass
class ConversionOptions:
    preserve_auto_layout: bool = True
    convert_effects: bool = True
    # import_variants and generate_tailwind are not read by the converter
    import_variants: bool = True
    use_flexbox: bool = True
    generate_tailwind: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ConversionOptions':
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (data or {}).items():
            key = _OPTION_ALIASES.get(key, key)
            if key in known:
                kwargs[key] = bool(value)
        return cls(**kwargs)


@dataclass
class ImageRef:
    node_id: str
    image_ref: str
    class_name: str = ''

    def to_dict(self) -> Dict[str, str]:
        return {'nodeId': self.node_id, 'imageRef': self.image_ref, 'className': self.class_name}


@dataclass
class ConversionResult:
    html: str
    css: str
    images: List[ImageRef] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'html': self.html,
            'css': self.css,
            'images': [image.to_dict() for image in self.images],
        }
