import logging
from typing import Dict, List, Optional, Union

from .effects import apply_effects
from .exceptions import DesignTooDeepError
from .layout import apply_base_styles, apply_layout_styles
from .models import ConversionOptions, ConversionResult, DesignNode, ImageRef, NodeType
from .naming import escape_html, infer_semantic_tag, sanitize_class_name
from .paint import apply_fills, apply_strokes
from .text import apply_text_styles, text_tag

logger = logging.getLogger(__name__)

INDENT = '  '


class _ConversionContext:
    """Accumulators owned by a single convert() call."""

    def __init__(self, options: ConversionOptions):
        self.options = options
        self.css_rules: Dict[str, Dict[str, str]] = {}
        self.images: List[ImageRef] = []


class FigmaToHTMLConverter:
    """Walks a design tree and emits HTML plus the matching stylesheet.

    The converter is stateless between calls; every call to ``convert`` gets
    its own style map and image list, so one instance can be shared freely.
    """

    def __init__(self, options: Optional[ConversionOptions] = None):
        self.options = options or ConversionOptions()
        self.handlers = {
            NodeType.TEXT: self.process_text,
            NodeType.FRAME: self.process_container,
            NodeType.GROUP: self.process_container,
            NodeType.COMPONENT: self.process_container,
            NodeType.COMPONENT_SET: self.process_container,
            NodeType.INSTANCE: self.process_container,
            NodeType.RECTANGLE: self.process_shape,
            NodeType.ELLIPSE: self.process_shape,
            NodeType.VECTOR: self.process_vector,
            NodeType.LINE: self.process_vector,
            NodeType.POLYGON: self.process_vector,
            NodeType.STAR: self.process_vector,
            NodeType.OTHER: self.process_other,
        }

    def convert(self, root: Union[DesignNode, Dict]) -> ConversionResult:
        if isinstance(root, dict):
            root = DesignNode.from_figma(root)

        context = _ConversionContext(self.options)
        html = self.process_node(root, context, 0)
        css = self.build_css(context.css_rules)

        logger.debug('Converted %r: %d css rules, %d images',
                     root.name, len(context.css_rules), len(context.images))
        return ConversionResult(html=html, css=css, images=context.images)

    def process_node(self, node: DesignNode, context: _ConversionContext, depth: int) -> str:
        class_name = sanitize_class_name(node.name)
        styles = self.extract_node_styles(node, class_name, context)

        # same-named nodes share one rule; the later non-empty one wins
        if styles:
            context.css_rules[class_name] = styles

        return self.handlers[node.type](node, class_name, context, depth)

    def extract_node_styles(self, node: DesignNode, class_name: str, context: _ConversionContext) -> Dict[str, str]:
        options = context.options
        styles: Dict[str, str] = {}

        apply_base_styles(node, styles, options)
        apply_fills(node, styles, context.images, class_name)
        apply_strokes(node, styles)

        if options.convert_effects:
            apply_effects(node, styles)

        if options.preserve_auto_layout:
            apply_layout_styles(node, styles, options)

        if node.type is NodeType.TEXT:
            apply_text_styles(node, styles)

        return styles

    def process_text(self, node: DesignNode, class_name: str, context: _ConversionContext, depth: int) -> str:
        indent = INDENT * depth
        tag = text_tag(node)
        text_content = escape_html(node.characters or '')
        return f'{indent}<{tag} class="{class_name}">{text_content}</{tag}>\n'

    def process_container(self, node: DesignNode, class_name: str, context: _ConversionContext, depth: int) -> str:
        indent = INDENT * depth
        tag = infer_semantic_tag(node.name)

        children_html = ''.join(
            self.process_node(child, context, depth + 1) for child in node.children
        )

        if children_html:
            return f'{indent}<{tag} class="{class_name}">\n{children_html}{indent}</{tag}>\n'
        return f'{indent}<{tag} class="{class_name}"></{tag}>\n'

    def process_shape(self, node: DesignNode, class_name: str, context: _ConversionContext, depth: int) -> str:
        return f'{INDENT * depth}<div class="{class_name}"></div>\n'

    def process_vector(self, node: DesignNode, class_name: str, context: _ConversionContext, depth: int) -> str:
        # vector geometry is not exported; the element is a labelled placeholder
        label = escape_html(node.name or '')
        return f'{INDENT * depth}<div class="{class_name}" aria-label="{label}"></div>\n'

    def process_other(self, node: DesignNode, class_name: str, context: _ConversionContext, depth: int) -> str:
        if node.children:
            return self.process_container(node, class_name, context, depth)
        return self.process_shape(node, class_name, context, depth)

    def build_css(self, css_rules: Dict[str, Dict[str, str]]) -> str:
        css_parts = []
        for class_name, styles in css_rules.items():
            if not styles:
                continue
            declarations = '\n'.join(f'  {prop}: {value};' for prop, value in styles.items())
            css_parts.append(f'.{class_name} {{\n{declarations}\n}}')
        return '\n\n'.join(css_parts)


def convert(root: Union[DesignNode, Dict],
            options: Union[ConversionOptions, Dict, None] = None) -> ConversionResult:
    if not isinstance(options, ConversionOptions):
        options = ConversionOptions.from_dict(options)
    return FigmaToHTMLConverter(options).convert(root)


def tree_depth(node: Union[DesignNode, Dict]) -> int:
    """Depth of the deepest branch, counting the root as 1."""
    children = (node.get('children') or []) if isinstance(node, dict) else node.children
    deepest = 0
    stack = [(child, 1) for child in children]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        nested = (current.get('children') or []) if isinstance(current, dict) else current.children
        stack.extend((child, level + 1) for child in nested)
    return deepest + 1


def ensure_depth(node: Union[DesignNode, Dict], limit: int):
    depth = tree_depth(node)
    if depth > limit:
        raise DesignTooDeepError(depth, limit)
