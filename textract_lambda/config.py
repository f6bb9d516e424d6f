import logging
import os

# Region and endpoint used to build the Textract client.
# TEXTRACT_ENDPOINT points the client at LocalStack (e.g. http://localhost:4566).
AWS_REGION = os.environ.get("AWS_REGION", os.environ.get("AWS_DEFAULT_REGION", "us-east-1"))
TEXTRACT_ENDPOINT = os.environ.get("TEXTRACT_ENDPOINT") or None

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"

# Local invoke server
API_STAGE = os.environ.get("API_STAGE", "dev")
SERVER_HOST = os.environ.get("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("SERVER_PORT", "9000"))
