import logging
from typing import Dict, List

from .api import FigmaAPI
from .models import ImageRef

logger = logging.getLogger(__name__)


def resolve_images(api: FigmaAPI, file_key: str, images: List[ImageRef],
                   format: str = 'png', scale: float = 2) -> Dict[str, str]:
    """Map node ids to exported image URLs with one batched export request."""
    if not images:
        return {}

    node_ids = list(dict.fromkeys(image.node_id for image in images))
    response = api.get_images(file_key, node_ids, format=format, scale=scale)
    exported = response.get('images') or {}

    urls = {node_id: url for node_id, url in exported.items() if url}
    missing = [node_id for node_id in node_ids if node_id not in urls]
    if missing:
        logger.warning('No export URL for %d image node(s): %s', len(missing), ', '.join(missing))
    return urls


def image_css(images: List[ImageRef], urls: Dict[str, str]) -> str:
    rules = []
    for image in images:
        url = urls.get(image.node_id)
        if url and image.class_name:
            rules.append(f".{image.class_name} {{ background-image: url('{url}'); }}")
    return '\n'.join(rules)
