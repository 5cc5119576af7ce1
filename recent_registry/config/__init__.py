"""
Central Configuration
All constants for the recent files registry in one place
"""

APP_NAME = "RecentRegistry"

# === RECENT FILES ===
MAX_RECENT = 10                           # Capacity of the MRU list
RECENT_FILES_FILENAME = "recent_files.json"
RECENT_FILES_VERSION = 1                  # On-disk record schema version
UNKNOWN_IDENTIFIER = "Unknown"            # Display name when a path has no final component

# === ENVIRONMENT OVERRIDES ===
ENV_DATA_DIR = "RECENT_REGISTRY_DATA_DIR"  # Base dir holding recent_files.json
