"""Client-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "sfsclient"

# Hard limit on response size so a rogue server cannot stream unbounded data.
MAX_RESPONSE_CHARACTERS = 100_000

# Same capacity libcurl uses for CURLOPT_ERRORBUFFER.
ERROR_BUFFER_SIZE = 256

GENERIC_TRANSPORT_ERROR = "Transport error"


class CONTENT_TYPE:
    JSON = "application/json"


class RETRY_POLICY:
    NONE = "none"
    BACKOFF = "backoff"
