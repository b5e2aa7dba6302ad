import hashlib
import hmac

DEMO_SECRET = "demosecret123abc"
DEMO_STREAM_ID = "YourStreamId"
FIXED_NOW = 1579788640

def split_token(token: str) -> dict:
    return dict(field.split("=", 1) for field in token.split("~"))

def field_names(token: str) -> list:
    return [field.split("=", 1)[0] for field in token.split("~")]

def expected_hmac(token: str, secret: str = DEMO_SECRET, stream_id: str = DEMO_STREAM_ID) -> str:
    # everything but the trailing hmac field, plus the hidden stream id
    visible = token.split("~")[:-1]
    material = "~".join(visible + [f"stream_id={stream_id}"])
    return hmac.new(secret.encode(), material.encode(), hashlib.sha256).hexdigest()
