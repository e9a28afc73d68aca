import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "model": "gemini",
    "gemini_model": "gemini-2.0-flash",
    "max_output_tokens": 1000,
    "temperature": 0.3,
    "review_delay_seconds": 1.0,  # fixed pause between consecutive file reviews
    "max_chars_per_file": 20000,
    "code_extensions": [
        ".js",
        ".ts",
        ".jsx",
        ".tsx",
        ".py",
        ".java",
        ".go",
        ".rb",
        ".php",
        ".cs",
        ".cpp",
        ".c",
    ],
    "exclude": [],  # fnmatch patterns or directory names to skip (e.g. "migrations/", "*.min.js")
}

# Secrets resolved from the environment, keyed by config name.
_ENV_SECRETS = {
    "webhook_secret": "GITHUB_SECRET",
    "github_token": "GITHUB_TOKEN",
    "gemini_api_key": "GEMINI_API_KEY",
    "anthropic_api_key": "ANTHROPIC_API_KEY",
    "openai_api_key": "OPENAI_API_KEY",
}

_PROVIDER_KEYS = {
    "gemini": "gemini_api_key",
    "anthropic": "anthropic_api_key",
    "openai": "openai_api_key",
}


def load_config(config_path: str = ".prcritic.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prcritic.yml in the current directory
      3. CLI argument overrides

    Secrets always come from the environment. This is the only function in
    prcritic_core that reads it; every component receives its values from the
    returned dict.
    """
    config = {
        **DEFAULT_CONFIG,
        "code_extensions": list(DEFAULT_CONFIG["code_extensions"]),
        "exclude": list(DEFAULT_CONFIG["exclude"]),
    }

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    for key, env_var in _ENV_SECRETS.items():
        config[key] = os.environ.get(env_var)

    return config


def validate_config(config: dict, require_webhook_secret: bool = True) -> list[str]:
    """Return the environment variable names of missing required secrets.

    An empty list means the configuration is usable.
    """
    required = ["github_token"]
    if require_webhook_secret:
        required.insert(0, "webhook_secret")
    provider_key = _PROVIDER_KEYS.get(config.get("model"))
    if provider_key:
        required.append(provider_key)
    return [_ENV_SECRETS[key] for key in required if not config.get(key)]
