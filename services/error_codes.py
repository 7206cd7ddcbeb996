"""
Standard error codes for the service layer.

Command handlers and the JSON boundary branch on these instead of parsing
error message text.
"""

VALIDATION_ERROR = "validation_error"
INSUFFICIENT_PLAYERS = "insufficient_players"
INTERNAL_ERROR = "internal_error"

# HTTP-equivalent status for each code at the JSON boundary
STATUS_BY_CODE = {
    VALIDATION_ERROR: 400,
    INSUFFICIENT_PLAYERS: 400,
    INTERNAL_ERROR: 500,
}
