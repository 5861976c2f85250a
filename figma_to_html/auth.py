"""
OAuth2 helpers for Figma: authorization URL, code exchange and token refresh.

Client credentials are read from ``settings`` at call time. Missing credentials
raise ``FigmaConfigError`` before any request is sent.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import requests

from . import settings
from .exceptions import FigmaAPIError, FigmaConfigError

logger = logging.getLogger(__name__)


@dataclass
class FigmaTokens:
    access_token: str
    refresh_token: str
    expires_in: int
    user_id: Optional[str] = None


def _client_credentials():
    if not settings.FIGMA_CLIENT_ID or not settings.FIGMA_CLIENT_SECRET:
        raise FigmaConfigError(
            'Figma OAuth credentials not configured. '
            'Set FIGMA_CLIENT_ID and FIGMA_CLIENT_SECRET.'
        )
    return settings.FIGMA_CLIENT_ID, settings.FIGMA_CLIENT_SECRET


def _post_form(url: str, data: dict) -> dict:
    response = requests.post(
        url,
        data=data,
        headers={'Content-Type': 'application/x-www-form-urlencoded'},
        timeout=settings.REQUEST_TIMEOUT,
    )
    if not response.ok:
        raise FigmaAPIError(response.status_code, response.text)
    return response.json()


def get_auth_url(state: Optional[str] = None) -> str:
    if not settings.FIGMA_CLIENT_ID:
        raise FigmaConfigError('FIGMA_CLIENT_ID not configured')

    params = {
        'client_id': settings.FIGMA_CLIENT_ID,
        'redirect_uri': settings.FIGMA_REDIRECT_URI,
        'scope': settings.FIGMA_OAUTH_SCOPE,
        'response_type': 'code',
    }
    if state:
        params['state'] = state

    return f'{settings.FIGMA_OAUTH_AUTH_URL}?{urlencode(params)}'


def exchange_code_for_tokens(code: str) -> FigmaTokens:
    client_id, client_secret = _client_credentials()
    logger.info('Exchanging authorization code (redirect_uri=%s)', settings.FIGMA_REDIRECT_URI)

    data = _post_form(settings.FIGMA_OAUTH_TOKEN_URL, {
        'client_id': client_id,
        'client_secret': client_secret,
        'redirect_uri': settings.FIGMA_REDIRECT_URI,
        'code': code,
        'grant_type': 'authorization_code',
    })

    logger.info('Token exchange succeeded')
    return FigmaTokens(
        access_token=data['access_token'],
        refresh_token=data['refresh_token'],
        expires_in=data['expires_in'],
        user_id=data.get('user_id'),
    )


def refresh_access_token(refresh_token: str) -> FigmaTokens:
    client_id, client_secret = _client_credentials()

    data = _post_form(settings.FIGMA_OAUTH_REFRESH_URL, {
        'client_id': client_id,
        'client_secret': client_secret,
        'refresh_token': refresh_token,
    })

    # Figma does not rotate refresh tokens
    return FigmaTokens(
        access_token=data['access_token'],
        refresh_token=refresh_token,
        expires_in=data['expires_in'],
    )
