"""Split an S3 object URL into bucket and key."""

import re
from typing import NamedTuple

from textract_lambda.errors import InputError

# https://<bucket>.<storage domain>/<key>
# The bucket is the first host label; the key is the rest of the path and may
# contain "/". Captured values are passed to Textract exactly as written.
S3_URL_PATTERN = re.compile(r"https://([^./]+)\.([^/]+)/(.+)")

INVALID_URL_MESSAGE = "Invalid S3 URL format"


class S3Location(NamedTuple):
    bucket: str
    key: str


def parse_s3_url(url: str) -> S3Location:
    """Return the bucket and key named by *url*.

    Raises InputError unless the whole string matches the expected shape.
    """
    match = S3_URL_PATTERN.fullmatch(url)
    if match is None:
        raise InputError(INVALID_URL_MESSAGE)
    return S3Location(bucket=match.group(1), key=match.group(3))
