"""API Gateway proxy responses."""

import json
import logging

from textract_lambda.errors import SerializationError

logger = logging.getLogger()

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

FALLBACK_ERROR_BODY = '{"error": "Internal server error"}'


def encode_body(body):
    try:
        return json.dumps(body)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def make_response(code, body):
    return {"statusCode": code, "headers": dict(CORS_HEADERS), "body": body}


def success_response(text):
    return make_response(200, encode_body({"text": text}))


def error_response(message):
    """500 response carrying *message*, or the fixed fallback if it won't encode."""
    try:
        body = encode_body({"error": message})
    except SerializationError:
        logger.exception("Could not encode error body")
        body = FALLBACK_ERROR_BODY
    return make_response(500, body)
