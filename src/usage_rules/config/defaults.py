"""Built-in default configuration for usage-rules."""

# Default configuration that serves as the base for all other configs
DEFAULT_CONFIG = {
    "version": "1.0",
    "settings": {
        "rules_filename": "usage-rules.md",
        "deps_dirs": ["deps"],
        "include_installed": False,
    },
    "dependencies": {},
}

PROJECT_CONFIG_FILENAME = "usage-rules.yaml"
USER_CONFIG_PATH = "~/.config/usage-rules/config.yaml"
