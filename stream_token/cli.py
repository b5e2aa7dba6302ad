# stream_token/cli.py
import os  # read environment variables
import sys
import logging
import argparse  # parse CLI args

from pydantic import ValidationError

from .errors import TokenError
from .models import TokenConfig
from .security import TOKEN_PREFIX, TokenBuilder

VERSION = "0.1.1"
SECRET_ENV = "STREAM_TOKEN_SECRET"

DESCRIPTION = """\
gen-token: A short script to generate valid authentication tokens for
Fastly stream targets in Wowza Streaming Cloud.

To access a protected stream target, requests must provide a parameter
block generated by this script, otherwise the request will be blocked.

Any token is tied to a specific stream id and has a limited lifetime.
Optionally, additional parameters can be factored in, for example the
client's IP address, or a start time denoting from when on the token is
valid. Keep in mind that the stream target configuration has to match
these optional parameters in some cases.
"""

EPILOG = """\
Examples:

# Generate a token that is valid for 1 hour (3600 seconds)
# and protects the stream id YourStreamId with a secret value of
# demosecret123abc
gen-token -l 3600 -u YourStreamId -k demosecret123abc
hdnts=exp=1579792240~hmac=efe1cef703a1951c7e01e49257ae33487adcf80ec91db2d264130fbe0daeb7ed

# Generate a token that is valid from 1578935505 to 1578935593
# seconds after 1970-01-01 00:00 UTC (Unix epoch time)
gen-token -s 1578935505 -e 1578935593 -u YourStreamId -k demosecret123abc
hdnts=st=1578935505~exp=1578935593~hmac=aaf01da130e5554eeb74159e9794c58748bc9f6b5706593775011964612b6d99
"""

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen-token",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-l", "--lifetime", dest="lifetime_seconds",
                        help="Token expires after SECONDS. --lifetime or --end_time is mandatory.")
    parser.add_argument("-e", "--end_time", dest="end_time",
                        help="Token expiration in Unix Epoch seconds. --end_time overrides --lifetime.")
    parser.add_argument("-u", "--stream_id", dest="stream_id",
                        help="STREAMID to validate the token against.")
    parser.add_argument("-k", "--key", dest="secret",
                        help=f"Secret required to generate the token (default: ${SECRET_ENV}). Do not share this secret.")
    parser.add_argument("-s", "--start_time", dest="start_time",
                        help="(Optional) Start time in Unix Epoch seconds. Use 'now' for the current time.")
    parser.add_argument("-i", "--ip", dest="ip",
                        help="(Optional) The token is only valid for this IP Address.")
    parser.add_argument("-d", "--vod_stream_id", dest="vod_stream_id",
                        help="(Optional) VOD stream id to include in the token.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:  # main entrypoint
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    secret = args.secret or os.environ.get(SECRET_ENV)  # signing secret

    try:
        config = TokenConfig(
            secret=secret,
            stream_id=args.stream_id,
            vod_stream_id=args.vod_stream_id,
            ip=args.ip,
            start_time=args.start_time,
            end_time=args.end_time,
            lifetime_seconds=args.lifetime_seconds,
        )
        token = TokenBuilder(config).generate_token()
    except TokenError as e:
        logger.debug("token rejected reason=%s", e.reason_code)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        print(f"error: invalid value for {fields}", file=sys.stderr)
        return 1

    print("")
    print(f"{TOKEN_PREFIX}={token}")  # output token to stdout
    return 0


if __name__ == "__main__":  # run as script
    sys.exit(main())
