"""Shared constants for sigscan dot-directories and artefact locations."""

SIGSCAN_HOME_EXT = ".sigscan"  # user-level state/config directory suffix

# Streaming read size for content hashing
HASH_CHUNK_SIZE = 1024 * 1024

# Filename of the status file written after each CLI scan
LAST_SCAN_STATUS_FILE = "last_scan.json"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"

# Shown after a scan finds matches
MALWARE_ADVISORY = (
    "Malware has been detected on your computer. We recommend changing all passwords for all "
    "accounts signed in on this computer and saved in browsers (including apps like Discord). "
    "See https://github.com/modrinth/oracle for more information."
)
