"""
Application-wide constants for the chat relay.

Note: Environment-dependent settings (ports, CORS, file paths) belong in settings.py.
This file is for operational parameters that rarely change between environments.
"""

# ==============================================================================
# LANGUAGE DEFAULTS
# ==============================================================================

# Language assigned to a session until the client updates it
DEFAULT_LANGUAGE: str = "en"

# Languages offered by the lexicon translator (code, English name, native name)
SUPPORTED_LANGUAGES: list[dict[str, str]] = [
    {"code": "en", "name": "English", "nativeName": "English"},
    {"code": "hi", "name": "Hindi", "nativeName": "हिंदी"},
    {"code": "ml", "name": "Malayalam", "nativeName": "മലയാളം"},
    {"code": "ta", "name": "Tamil", "nativeName": "தமிழ்"},
]

# ==============================================================================
# TRANSLATION CONFIDENCE
# ==============================================================================

# A translation is delivered only when its confidence is strictly above this
TRANSLATION_CONFIDENCE_THRESHOLD: float = 0.3

# Lexicon confidence levels per lookup strategy
CONFIDENCE_EXACT_MATCH: float = 0.9
CONFIDENCE_REVERSE_MATCH: float = 0.8
CONFIDENCE_WORD_SUBSTITUTION: float = 0.6
CONFIDENCE_NO_MATCH: float = 0.3
CONFIDENCE_FAILED: float = 0.0
CONFIDENCE_SAME_LANGUAGE: float = 1.0

# ==============================================================================
# TIMING
# ==============================================================================

# Delay before a typing indicator is cleared (seconds)
TYPING_INDICATOR_TIMEOUT_SEC: float = 3.0

# Upper bound on a single translation call (seconds)
TRANSLATION_TIMEOUT_SEC: float = 5.0

# ==============================================================================
# MESSAGES
# ==============================================================================

# The only message kind relayed by the chat core
MESSAGE_TYPE_TEXT: str = "text"

# Error messages sent back to the client on caller misuse
ERROR_SESSION_NOT_FOUND: str = "User session not found"
ERROR_JOIN_MISSING_FIELDS: str = "roomId and userId are required"
ERROR_INVALID_FORMAT: str = "Invalid message format"

# Service name reported by the health endpoint
SERVICE_NAME: str = "AI Mandi Backend"
