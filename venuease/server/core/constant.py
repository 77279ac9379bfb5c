"""Server-wide constants."""

PROJECT_NAME = "VenuEase"
API_PREFIX = "/api"
ADMIN_PREFIX = f"{API_PREFIX}/admin"
VERSION = "1.0.0"
