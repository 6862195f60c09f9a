SECRET_KEY = "test-secret"

# Tests inject an in-memory gateway; these are never dialled.
SUPABASE_CONFIG = {
    "url": "http://localhost:54321",
    "anon_key": "test-anon-key",
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
SESSION_DAYS = 1
