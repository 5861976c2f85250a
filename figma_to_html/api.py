import logging
import time
from typing import Dict, List, Optional

import requests

from . import settings
from .exceptions import FigmaAPIError, FigmaConfigError

logger = logging.getLogger(__name__)


class FigmaAPI:

    def __init__(self, access_token: str, base_url: Optional[str] = None):
        if not access_token:
            raise FigmaConfigError(
                'Figma access token is not configured. '
                'Pass a token or set FIGMA_ACCESS_TOKEN.'
            )
        self.access_token = access_token
        self.base_url = base_url or settings.FIGMA_API_BASE
        self.headers = {
            'X-Figma-Token': access_token,
            'Content-Type': 'application/json',
        }

    def _make_request_with_retry(self, method: str, url: str, **kwargs) -> requests.Response:
        max_retries = settings.MAX_RETRIES
        kwargs.setdefault('timeout', settings.REQUEST_TIMEOUT)

        for attempt in range(max_retries):
            last_attempt = attempt == max_retries - 1
            try:
                response = requests.request(method, url, headers=self.headers, **kwargs)
            except requests.exceptions.RequestException as e:
                if last_attempt:
                    raise
                wait_time = settings.INITIAL_BACKOFF * (2 ** attempt)
                logger.warning('Request failed: %s. Retrying in %s seconds...', e, wait_time)
                time.sleep(wait_time)
                continue

            if response.status_code == 429 and not last_attempt:
                retry_after = response.headers.get('Retry-After')
                if retry_after and retry_after.isdigit():
                    wait_time = int(retry_after)
                else:
                    wait_time = settings.INITIAL_BACKOFF * (2 ** attempt)
                logger.warning('Rate limit hit (429). Waiting %s seconds before retry %d/%d...',
                               wait_time, attempt + 1, max_retries)
                time.sleep(wait_time)
                continue

            if not response.ok:
                raise FigmaAPIError(response.status_code, response.text)
            return response

    def request(self, endpoint: str, params: Optional[Dict] = None) -> Dict:
        url = f'{self.base_url}{endpoint}'
        response = self._make_request_with_retry('GET', url, params=params)
        return response.json()

    def get_me(self) -> Dict:
        return self.request('/me')

    def get_file(self, file_key: str, depth: Optional[int] = None) -> Dict:
        params = {'depth': depth} if depth else None
        return self.request(f'/files/{file_key}', params=params)

    def get_file_nodes(self, file_key: str, node_ids: List[str]) -> Dict:
        return self.request(f'/files/{file_key}/nodes', params={'ids': ','.join(node_ids)})

    def get_images(self, file_key: str, node_ids: List[str],
                   format: str = 'png', scale: float = 2) -> Dict:
        params = {
            'ids': ','.join(node_ids),
            'format': format,
            'scale': scale
        }
        return self.request(f'/images/{file_key}', params=params)

    def get_local_variables(self, file_key: str) -> Dict:
        return self.request(f'/files/{file_key}/variables/local')
