# Environment variables
ENV_BASE_URL = "REQUEST_API_URL"
ENV_ACCESS_TOKEN = "REQUEST_API_ACCESS_TOKEN"
ENV_TIMEOUT = "REQUEST_API_TIMEOUT"
ENV_DEBUG = "REQUEST_API_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CONTENT_TYPE_JSON = "application/json"

# Schema
ENDPOINT_MARKERS = ("api_schema", "apiSchema")

# Logging
LOGGER_NAME = "request_api"
PACKAGE_NAME = "request-api"
