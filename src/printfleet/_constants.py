"""Internal constants shared across the library."""

USER_AGENT = "printfleet/1"
DEFAULT_REQUEST_TIMEOUT = 30.0

# ------------------------------------------------------------------
# Operator-facing messages for guarded job commands
# ------------------------------------------------------------------

STOP_JOB_CONFIRMATION = "The printer is still printing - are you sure to stop it?"
STOP_JOB_NOT_PRINTING = "The printer is not printing, there is no job to stop."
PRINT_BLOCKED = "This printer is printing or not connected! Either way printing is not an option."
PRINT_STATUS_UNKNOWN = "The printer status is not known yet, printing is not an option."
UNKNOWN_PRINTER = "The printer is not known to this client."
