# Environment variables
ENV_ACCESS_TOKEN = "AUTHHELPER_ACCESS_TOKEN"
ENV_DEBUG = "AUTHHELPER_DEBUG"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Response messages
MESSAGE_SUCCESS = "Request succeeded"
MESSAGE_INVALID_URL = "Invalid URL"
MESSAGE_NOT_SIGNED_IN = "Not signed in"
MESSAGE_NO_TOKEN = "Failed to get token"

LOGGER_NAME = "authhelper"
