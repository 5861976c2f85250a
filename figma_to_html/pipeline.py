import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import requests

from . import settings
from .api import FigmaAPI
from .converter import convert, ensure_depth
from .document import build_embedded_snippet
from .exceptions import FigmaError, InvalidFigmaUrlError, NodeNotFoundError
from .images import image_css, resolve_images
from .models import ConversionOptions, ConversionResult
from .urls import parse_figma_url

logger = logging.getLogger(__name__)

TOP_LEVEL_FRAME_TYPES = ('FRAME', 'COMPONENT')


@dataclass
class ImportResult:
    result: ConversionResult
    file_name: str
    node_id: str
    node_name: str

    def snippet(self) -> str:
        return build_embedded_snippet(self.result, self.file_name)


def fetch_target_node(api: FigmaAPI, file_key: str, node_id: Optional[str]) -> Tuple[Dict, str]:
    """Return the node to convert and the file name.

    Without a node id the first frame or component on the first page is used.
    """
    if node_id:
        response = api.get_file_nodes(file_key, [node_id])
        node_data = (response.get('nodes') or {}).get(node_id)
        if not node_data:
            raise NodeNotFoundError(f'Node {node_id} not found in Figma file')
        return node_data['document'], response.get('name', '')

    response = api.get_file(file_key, depth=2)
    pages = response.get('document', {}).get('children', [])
    if not pages:
        raise NodeNotFoundError('No pages found in Figma file')

    for child in pages[0].get('children', []):
        if child.get('type') in TOP_LEVEL_FRAME_TYPES:
            return child, response.get('name', '')

    raise NodeNotFoundError('No frames found on the first page. Please select a specific frame.')


def import_design(api: FigmaAPI, figma_url: str,
                  options: Union[ConversionOptions, Dict, None] = None) -> ImportResult:
    link = parse_figma_url(figma_url)
    if link is None:
        raise InvalidFigmaUrlError(
            'Invalid Figma URL. Please provide a valid Figma file or frame link.'
        )

    node, file_name = fetch_target_node(api, link.file_key, link.node_id)
    ensure_depth(node, settings.MAX_TREE_DEPTH)

    result = convert(node, options)

    if result.images:
        try:
            urls = resolve_images(api, link.file_key, result.images)
        except (FigmaError, requests.exceptions.RequestException) as e:
            logger.error('Failed to fetch images: %s', e)
        else:
            extra_css = image_css(result.images, urls)
            if extra_css:
                result.css = f'{result.css}\n\n{extra_css}' if result.css else extra_css

    return ImportResult(
        result=result,
        file_name=file_name,
        node_id=node.get('id', ''),
        node_name=node.get('name', ''),
    )
