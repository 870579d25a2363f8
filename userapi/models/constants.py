"""Constants for userapi.

This module centralizes the fixed names, routes and messages used throughout the application.
"""

SERVICE_VERSION = "0.1.0"
DEFAULT_SERVICE_NAME = "userapi"

# Routing
API_PREFIX = "/api/v1"
USERS_PATH = f"{API_PREFIX}/users"

# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"

# Error messages
NAME_EMPTY_MESSAGE = "Name cannot be empty"
EMAIL_EMPTY_MESSAGE = "Email cannot be empty"
EMAIL_INVALID_MESSAGE = "Invalid email format"
INTERNAL_ERROR_MESSAGE = "Internal server error"
