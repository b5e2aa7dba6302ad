class TokenError(ValueError):
    reason_code = "INVALID_CONFIG"
    default_message = "Token configuration is invalid."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


# --- Raised by TokenBuilder() ---
class MissingSecret(TokenError):
    reason_code = "MISSING_SECRET"
    default_message = "Secret must be provided to generate a token."


class MissingStreamId(TokenError):
    reason_code = "MISSING_STREAM_ID"
    default_message = "Stream ID must be provided to generate a token."


# --- Raised by generate_token() ---
class InvalidStartTime(TokenError):
    reason_code = "INVALID_START_TIME"
    default_message = 'start_time must be a number ( > 0 ) or "now"'


class InvalidEndTime(TokenError):
    reason_code = "INVALID_END_TIME"
    default_message = "end_time must be a number ( > 0 )"


class InvalidLifetime(TokenError):
    reason_code = "INVALID_LIFETIME"
    default_message = "lifetime_seconds must be a number ( > 0 )"


class MissingExpiration(TokenError):
    reason_code = "MISSING_EXPIRATION"
    default_message = "You must provide end_time or lifetime_seconds"


class StartAfterExpiration(TokenError):
    reason_code = "START_AFTER_EXPIRATION"
    default_message = "Token start time is equal to or after expiration time."


class AlreadyExpired(TokenError):
    reason_code = "ALREADY_EXPIRED"
    default_message = "Token will have already expired"
