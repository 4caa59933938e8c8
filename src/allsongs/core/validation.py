"""
Configuration validation utilities.
"""

import importlib
from typing import List, Tuple
from .config import SPOTIFY_CONFIG, LOGGING_CONFIG
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }
    
    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )
    
    if SPOTIFY_CONFIG["REQUEST_DELAY"] is None:
        errors.append("ALLSONGS_REQUEST_DELAY must be a number of seconds")
    elif SPOTIFY_CONFIG["REQUEST_DELAY"] < 0:
        errors.append("Spotify REQUEST_DELAY must be >= 0")
    
    if SPOTIFY_CONFIG["TIMEOUT"] < 1:
        errors.append("Spotify TIMEOUT must be >= 1")
    
    if not 1 <= SPOTIFY_CONFIG["PAGE_SIZE"] <= 50:
        errors.append("Spotify PAGE_SIZE must be between 1 and 50")
    
    if not 1 <= SPOTIFY_CONFIG["RELEASE_BATCH_SIZE"] <= 20:
        errors.append("Spotify RELEASE_BATCH_SIZE must be between 1 and 20")
    
    if not 1 <= SPOTIFY_CONFIG["TRACK_BATCH_SIZE"] <= 50:
        errors.append("Spotify TRACK_BATCH_SIZE must be between 1 and 50")
    
    if not 1 <= SPOTIFY_CONFIG["PLAYLIST_CHUNK_SIZE"] <= 100:
        errors.append("Spotify PLAYLIST_CHUNK_SIZE must be between 1 and 100")
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")
    
    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
