"""User-facing messages, error strings and log templates."""

# Error Messages
ERROR_EMPTY_CHARGEABLE_INPUT = (
    "No chargeable entries: every timestamp falls on a toll-free date or outside the toll hours"
)
ERROR_UNKNOWN_MONTH = "Invalid month {month}: no toll-free rule configured, treating {day} as chargeable"
ERROR_AWARE_TIMESTAMP = "Timestamps must be naive local times, got {value}"
ERROR_OVERLAPPING_BANDS = "Fee bands overlap or are out of order: {previous} and {current}"
ERROR_EMPTY_BAND = "Fee band must start before it ends: {start} >= {end}"
ERROR_INVALID_MONTH_KEY = "Month must be between 1 and 12, got {month}"
ERROR_INVALID_DAY = "Day of month must be between 1 and 31, got {day}"

# Log Messages
LOG_EXEMPT_VEHICLE = "Vehicle type %s is toll free"
LOG_EMPTY_CHARGEABLE_ZERO = "No chargeable entries among %d timestamps, charging 0"
LOG_POLICY_LOADED = "Loaded toll policy %s: %d fee bands, %d exempt vehicle types"

# CLI
CLI_NO_CHARGEABLE = "Error: {error}"
CLI_INVALID_INPUT = "Invalid input: {error}"
