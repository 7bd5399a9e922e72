"""
Service Constants

Endpoints and limits of the whats-th.is API.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("owo")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Base URL of the API.
API_BASE = "https://api.awau.moe"

# Path to POST multipart uploads to.
UPLOAD_PATH = "/upload/pomf"

# Path to request shortened URLs from.
SHORTEN_PATH = "/shorten/polr"

# The maximum number of files that may be uploaded in one request.
MAX_FILES = 3

# Multipart field name every uploaded file is sent under.
UPLOAD_FIELD = "files[]"

# Fallback content type for payloads nothing else identifies.
DEFAULT_CONTENT_TYPE = "application/octet-stream"

USER_AGENT = (
    f"WhatsThisClient (https://github.com/whats-this/owo.py, {__version__})"
)
