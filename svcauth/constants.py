"""Well-known values used by service account credentials."""

GOOGLE_OAUTH_REFRESH_ENDPOINT = "https://oauth2.googleapis.com/token"
GOOGLE_OAUTH_SCOPE_CLOUD_PLATFORM = "https://www.googleapis.com/auth/cloud-platform"

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"

DEFAULT_P12_PASSWORD = "notasecret"

# Lifetime requested for each signed assertion.
JWT_LIFETIME_SECONDS = 3600
