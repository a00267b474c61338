"""Wire-stable error code and message constants.

These values are part of the envelope contract: clients compare against them,
so they must not change between releases.
"""

# Unclassified errors encoded at the transport boundary
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
INTERNAL_SERVER_MESSAGE = "An internal server error occurred"

# Normalization sentinel for envelopes that carry no usable error information
UNKNOWN_ERROR = "UNKNOWN_ERROR"
UNKNOWN_DETAIL = (
    "Request failed without error details. This may be due to malformed JSON, "
    "invalid JSON format, or empty response body"
)
