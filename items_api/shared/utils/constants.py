"""
Application Constants

Values shared across configuration, the auth gate and the CLI.
"""

# Config file looked up in ~/.config/ and the working directory
CONFIG_FILE_NAME = "items-api.toml"

# Header carrying the admin shared secret
API_KEY_HEADER = "api-key"

# Development default; real deployments override API_KEY per environment
DEFAULT_API_KEY = "items-api-key"

# Header used to correlate log lines of a single request
REQUEST_ID_HEADER = "X-Request-ID"

LOG_LEVELS = ("trace", "debug", "info", "warn", "error")
