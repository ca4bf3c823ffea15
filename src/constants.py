"""Constants used in business logic."""

UNABLE_TO_PROCESS_RESPONSE = "Request failed"

# Endpoints answering malformed request bodies with their own error body
PROXY_ENDPOINT_PATHS = ("/v1/generate", "/v1/talk")

# Persona used for every text generation request when no other system prompt
# is specified in configuration file
DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. Respond in a friendly, clear, and concise "
    "way. Keep responses natural and conversational. Do not include any "
    "promotional text, download instructions, or phone-related content. Just "
    "answer the user's question directly."
)

# Generative Language API
DEFAULT_GENERATION_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GENERATION_MODEL = "gemini-2.0-flash-001"
DEFAULT_GENERATION_API_KEY_ENV = "GOOGLE_GENERATIVE_API_KEY"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_K = 40
DEFAULT_TOP_P = 0.95
DEFAULT_MAX_OUTPUT_TOKENS = 1024
DEFAULT_GENERATION_TIMEOUT = 60

# Reply cache
DEFAULT_REPLY_CACHE_TTL = 5 * 60

# Avatar video (talks) API
DEFAULT_AVATAR_URL = "https://api.d-id.com"
DEFAULT_AVATAR_API_KEY_ENVS = ("DID_API_KEY", "NEXT_PUBLIC_DID_API_KEY")
DEFAULT_AVATAR_BASIC_AUTH_ENVS = ("DID_BASIC_AUTH",)
DEFAULT_SOURCE_URL = "https://create-images-results.d-id.com/DefaultImages/actor.jpg"
DEFAULT_VOICE_ID = "en-US-JennyNeural"
DEFAULT_VOICE_PROVIDER = "microsoft"
DEFAULT_POLL_INTERVAL = 1.2
DEFAULT_POLL_TIMEOUT = 30.0
DEFAULT_AVATAR_REQUEST_TIMEOUT = 30

# Talk endpoints, relative to the avatar API base URL
TALKS_MODERN_PATH = "/v1/talks"
TALKS_LEGACY_PATH = "/talks"

# Remote talk job statuses
TALK_STATUS_PENDING = "pending"
TALK_STATUS_DONE = "done"
TALK_STATUS_ERROR = "error"

# Length of the talk text prefix written into logs
LOGGED_TEXT_PREFIX_LENGTH = 50

# Environment variable used to pass configuration path to uvicorn workers
CONFIG_PATH_ENV = "VOICE_AVATAR_PROXY_CONFIG_PATH"
