from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StartNow(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["now"] = "now"


class StartAt(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["at"] = "at"
    seconds: int


StartTime = Annotated[Union[StartNow, StartAt], Field(discriminator="kind")]


class TokenConfig(BaseModel):
    """Inputs for one token build.

    ``secret`` and ``stream_id`` are optional here so that TokenBuilder can
    report them with its own errors. Time fields accept decimal strings as
    handed over by the command line; ``start_time`` also takes ``"now"``.
    """

    model_config = ConfigDict(frozen=True)

    secret: str | bytes | None = None
    stream_id: str | None = None
    vod_stream_id: str | None = None
    ip: str | None = None
    start_time: StartTime | None = None
    end_time: int | None = None
    lifetime_seconds: int | None = None

    @field_validator("stream_id", "vod_stream_id", "ip", "end_time", "lifetime_seconds", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and value == "":
            return None
        return value

    @field_validator("start_time", mode="before")
    @classmethod
    def _parse_start_time(cls, value: Any) -> Any:
        if value is None or isinstance(value, (StartNow, StartAt, dict)):
            return value
        if isinstance(value, str):
            if value == "":
                return None
            if value.strip().lower() == "now":
                return {"kind": "now"}
        return {"kind": "at", "seconds": value}


class ResolvedTimes(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int | None
    end: int
    # False when start was defaulted from the clock for a lifetime window
    start_given: bool
