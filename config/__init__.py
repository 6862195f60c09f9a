import os

_ENVIRONMENTS = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; unknown or unset values fall back to development."""
    env = os.getenv("APP_ENV", "").strip().lower()
    return _ENVIRONMENTS.get(env, "config.development")
