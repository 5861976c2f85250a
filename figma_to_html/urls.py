import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlparse


@dataclass
class FigmaLink:
    file_key: str
    node_id: Optional[str] = None


def parse_figma_url(url: str) -> Optional[FigmaLink]:
    """Extract the file key and node id from a Figma share link.

    Handles ``/file/<key>`` and ``/design/<key>`` paths. The ``node-id`` query
    value uses ``-`` in URLs and ``:`` in the API, so it is converted back.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if 'figma.com' not in (parsed.hostname or ''):
        return None

    match = re.search(r'/(?:file|design)/([a-zA-Z0-9]+)', parsed.path)
    if not match:
        return None

    node_ids = parse_qs(parsed.query).get('node-id')
    node_id = node_ids[0].replace('-', ':') if node_ids and node_ids[0] else None

    return FigmaLink(file_key=match.group(1), node_id=node_id)
