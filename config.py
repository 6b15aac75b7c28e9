"""
Configuration module for the TikTok link relay.
Centralizes all environment variables and application constants.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME", "link_relay.log")

# Comma separated list of allowed origins for browser clients
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# =============================================================================
# Upstream Service
# =============================================================================

# Conversion service the relay forwards to. Not configurable on purpose.
UPSTREAM_URL = "https://ttdownloader.com/req/"

# Literal value of the "format" form field
UPSTREAM_FORMAT = "mp4"

# Client identity presented to the upstream service
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"

# =============================================================================
# Extraction
# =============================================================================

# Domain token used for thumbnail lookup and download filenames
PLATFORM_NAME = "tiktok"

# Title used when the page has no recognisable heading
DEFAULT_TITLE = "untitled video"

# Accepted shape of user supplied video URLs
VIDEO_URL_PATTERN = r"^https?://(www\.)?(tiktok\.com|vm\.tiktok\.com)"
