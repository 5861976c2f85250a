from .converter import FigmaToHTMLConverter, convert, ensure_depth, tree_depth
from .exceptions import (
    DesignTooDeepError,
    FigmaAPIError,
    FigmaConfigError,
    FigmaError,
    InvalidFigmaUrlError,
    NodeNotFoundError,
)
from .models import ConversionOptions, ConversionResult, DesignNode, ImageRef, NodeType
from .naming import infer_semantic_tag, sanitize_class_name

__all__ = [
    'FigmaToHTMLConverter',
    'convert',
    'ensure_depth',
    'tree_depth',
    'ConversionOptions',
    'ConversionResult',
    'DesignNode',
    'ImageRef',
    'NodeType',
    'infer_semantic_tag',
    'sanitize_class_name',
    'FigmaError',
    'FigmaConfigError',
    'FigmaAPIError',
    'InvalidFigmaUrlError',
    'NodeNotFoundError',
    'DesignTooDeepError',
]
