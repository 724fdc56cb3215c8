# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file)
and from a Java-style properties file (default: ./config.properties).
Environment variables win over the properties file.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name (default: astro-schedule).",
    "ASTRO_LOG_LEVEL": "Logging level; Python or java.util.logging names (default: INFO).",
    "ASTRO_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/astro.log (true/false).",
    # Connectors
    "ASTRO_CONSOLE_ENABLED": "Run the interactive console (true/false).",
    # Paths (gitignored)
    "ASTRO_CONFIG_FILE": "Properties file path (default: config.properties).",
    "ASTRO_DATA_DIR": "Local data directory for logs (default: .local/astro).",
}

PROPERTIES = {
    "log.level": "Logging level used when ASTRO_LOG_LEVEL is not set (e.g. INFO, FINE, SEVERE).",
}
