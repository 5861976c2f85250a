"""
Runtime configuration: Figma credentials, API endpoints and converter limits.

Values come from the environment; a ``.env`` file in the working directory is
loaded first when present.
"""
import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.getcwd(), '.env'))

# ============================================================
# Figma API
# ============================================================
FIGMA_API_BASE = os.getenv('FIGMA_API_BASE', 'https://api.figma.com/v1')
FIGMA_OAUTH_AUTH_URL = 'https://www.figma.com/oauth'
FIGMA_OAUTH_TOKEN_URL = f'{FIGMA_API_BASE}/oauth/token'
FIGMA_OAUTH_REFRESH_URL = f'{FIGMA_API_BASE}/oauth/refresh'
FIGMA_OAUTH_SCOPE = 'file_content:read'

# Personal access token used by the CLI when --token is not given
FIGMA_ACCESS_TOKEN = os.getenv('FIGMA_ACCESS_TOKEN', '')

# ============================================================
# OAuth application
# ============================================================
APP_URL = os.getenv('APP_URL', 'http://localhost:3000')
FIGMA_CLIENT_ID = os.getenv('FIGMA_CLIENT_ID', '')
FIGMA_CLIENT_SECRET = os.getenv('FIGMA_CLIENT_SECRET', '')
FIGMA_REDIRECT_URI = os.getenv('FIGMA_REDIRECT_URI', f'{APP_URL}/api/figma/auth/callback')

# ============================================================
# Requests
# ============================================================
REQUEST_TIMEOUT = float(os.getenv('FIGMA_REQUEST_TIMEOUT', '30'))
MAX_RETRIES = 5
INITIAL_BACKOFF = 1

# ============================================================
# Converter
# ============================================================
MAX_TREE_DEPTH = int(os.getenv('FIGMA_MAX_TREE_DEPTH', '200'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
