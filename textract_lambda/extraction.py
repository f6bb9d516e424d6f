"""Textract client handle and text assembly from DetectDocumentText blocks."""

import logging
from typing import Iterable, List, NamedTuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from textract_lambda import config
from textract_lambda.errors import CapabilityError
from textract_lambda.locator import S3Location

logger = logging.getLogger()

# Block types whose text ends up in the response. WORD blocks repeat the
# text of the LINE they belong to, so every word appears twice in the output.
TEXT_BLOCK_TYPES = ("LINE", "WORD")

textract_client = None


class Fragment(NamedTuple):
    category: str
    text: str


def get_textract_client():
    """Build the Textract client on first use and reuse it afterwards."""
    global textract_client
    if textract_client is None:
        textract_client = boto3.client(
            "textract",
            region_name=config.AWS_REGION,
            endpoint_url=config.TEXTRACT_ENDPOINT,
        )
    return textract_client


def detect_document_text(location: S3Location) -> List[Fragment]:
    """Run DetectDocumentText on the object at *location*.

    Any failure from the SDK or the service is raised as CapabilityError;
    the handler treats them all the same way.
    """
    try:
        result = get_textract_client().detect_document_text(
            Document={"S3Object": {"Bucket": location.bucket, "Name": location.key}}
        )
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "Unknown")
        logger.warning("Textract rejected s3://%s/%s: %s", location.bucket, location.key, code)
        raise CapabilityError(str(e)) from e
    except BotoCoreError as e:
        raise CapabilityError(str(e)) from e

    blocks = result.get("Blocks", [])
    logger.info("Textract returned %d blocks", len(blocks))
    return [Fragment(b.get("BlockType", ""), b.get("Text", "")) for b in blocks]


def join_fragments(fragments: Iterable[Fragment]) -> str:
    """Concatenate LINE and WORD text in order, each followed by a newline."""
    parts = []
    for fragment in fragments:
        if fragment.category in TEXT_BLOCK_TYPES:
            parts.append(fragment.text + "\n")
    return "".join(parts)
