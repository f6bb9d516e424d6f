"""
Lambda handler: extract text from an S3 image with AWS Textract.

Invoked through an API Gateway proxy integration with a JSON body
{"s3_url": "https://<bucket>.s3.<region>.amazonaws.com/<key>"}.
Returns {"text": ...} with status 200, or {"error": ...} with status 500.
"""

import base64
import json
import logging

from textract_lambda import config
from textract_lambda.errors import InputError
from textract_lambda.extraction import detect_document_text, join_fragments
from textract_lambda.locator import parse_s3_url
from textract_lambda.responses import error_response, success_response

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)


def lambda_handler(event, context):
    try:
        payload = read_payload(event)
        s3_url = payload.get("s3_url")
        if s3_url is None:
            raise InputError("Missing 's3_url' in request body")
        if not isinstance(s3_url, str):
            raise InputError("'s3_url' must be a string")

        location = parse_s3_url(s3_url)
        logger.info("Processing image from bucket: %s, key: %s", location.bucket, location.key)

        fragments = detect_document_text(location)
        return success_response(join_fragments(fragments))

    except Exception as exc:
        logger.exception("Error processing request")
        return error_response(str(exc))


def read_payload(event):
    """Return the request payload as a dict.

    API Gateway proxy events carry "httpMethod" and the JSON in "body",
    possibly base64-encoded. Anything else is a direct invocation and the
    event itself is the payload.
    """
    if not isinstance(event, dict):
        raise InputError("Event must be a JSON object")
    if "body" not in event or "httpMethod" not in event:
        return event

    body = event["body"]
    if body is None:
        raise InputError("Request body is empty")
    if event.get("isBase64Encoded", False):
        try:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        except ValueError as e:
            raise InputError("Request body is not valid base64: " + str(e)) from e

    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            raise InputError("Request body is not valid JSON: " + str(e)) from e

    if not isinstance(body, dict):
        raise InputError("Request body must be a JSON object")
    return body
