import hashlib
import hmac
import logging
import time
from typing import Callable

from .errors import (
    AlreadyExpired,
    InvalidEndTime,
    InvalidLifetime,
    InvalidStartTime,
    MissingExpiration,
    MissingSecret,
    MissingStreamId,
    StartAfterExpiration,
)
from .models import ResolvedTimes, StartNow, TokenConfig

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "~"
TOKEN_PREFIX = "hdnts"


def current_unix_time() -> int:
    return int(time.time())


def sign(material: str, secret: str | bytes) -> str:
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    return hmac.new(key, material.encode("utf-8"), hashlib.sha256).hexdigest()


class TokenBuilder:
    """Builds ``[vod_stream_id=..~][ip=..~][st=..~]exp=..~hmac=..`` tokens.

    The HMAC covers the visible fields followed by ``stream_id=<id>``, which
    is never part of the token itself. A verifier has to rebuild exactly that
    string, so field order and the inclusion rules below are fixed.
    """

    def __init__(self, config: TokenConfig, clock: Callable[[], int] = current_unix_time):
        if not config.secret:
            raise MissingSecret()
        if not config.stream_id:
            raise MissingStreamId()
        self.config = config
        self.clock = clock

    def resolve_times(self) -> ResolvedTimes:
        cfg = self.config

        start = None
        if isinstance(cfg.start_time, StartNow):
            start = self.clock()
        elif cfg.start_time is not None:
            if cfg.start_time.seconds <= 0:
                raise InvalidStartTime()
            start = cfg.start_time.seconds

        if cfg.end_time is not None and cfg.end_time <= 0:
            raise InvalidEndTime()

        if cfg.lifetime_seconds is not None and cfg.lifetime_seconds <= 0:
            raise InvalidLifetime()

        if cfg.end_time is not None:
            if start is not None and start >= cfg.end_time:
                raise StartAfterExpiration()
            end = cfg.end_time
        else:
            if cfg.lifetime_seconds is None:
                raise MissingExpiration()
            if start is None:
                start = self.clock()
            end = start + cfg.lifetime_seconds

        if start is not None and end < start:
            raise AlreadyExpired()

        return ResolvedTimes(start=start, end=end, start_given=cfg.start_time is not None)

    def visible_fields(self, times: ResolvedTimes) -> list[str]:
        cfg = self.config
        fields = []
        if cfg.vod_stream_id:
            fields.append(f"vod_stream_id={cfg.vod_stream_id}")
        if cfg.ip:
            fields.append(f"ip={cfg.ip}")
        # a start defaulted for a lifetime window is signed into exp only
        if times.start_given:
            fields.append(f"st={times.start}")
        fields.append(f"exp={times.end}")
        return fields

    def generate_token(self) -> str:
        times = self.resolve_times()
        fields = self.visible_fields(times)

        material = FIELD_DELIMITER.join(fields + [f"stream_id={self.config.stream_id}"])
        digest = sign(material, self.config.secret)

        logger.debug(
            "token built start=%s exp=%s fields=%s",
            times.start, times.end, [f.split("=", 1)[0] for f in fields],
        )
        return FIELD_DELIMITER.join(fields + [f"hmac={digest}"])


def generate_token(config: TokenConfig, clock: Callable[[], int] = current_unix_time) -> str:
    return TokenBuilder(config, clock=clock).generate_token()
