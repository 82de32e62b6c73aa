"""Messages returned to API clients."""

RECORD_NOT_FOUND = "Record not found"
FAILED_TO_CREATE_RECORD = "Failed to create record"
