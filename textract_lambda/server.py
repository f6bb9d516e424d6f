"""
Local server for the Textract Lambda.

Two ways in:
  POST /2015-03-31/functions/{function_name}/invocations
      Lambda Invoke API; the JSON body is the event.
  POST /{stage}/process-image
      API Gateway proxy emulation; the request is wrapped in a proxy event
      and the handler's statusCode/headers/body become the HTTP response.

Textract calls go to real AWS, or to LocalStack when TEXTRACT_ENDPOINT is set.
"""

import base64

from flask import Flask, Response, current_app, jsonify, request
from flask_cors import cross_origin

from textract_lambda import config
from textract_lambda.handler import lambda_handler

app = Flask(__name__)


@app.route("/2015-03-31/functions/<function_name>/invocations", methods=["POST"])
def invoke(function_name):
    """Mimics the Lambda Invoke API."""
    try:
        event = request.get_json(force=True)
        result = lambda_handler(event, None)
        return jsonify(result), 200
    except Exception as e:
        app.logger.exception("Invocation of %s failed", function_name)
        return jsonify({"error": str(e)}), 500


@app.route("/<stage>/process-image", methods=["POST"], provide_automatic_options=False)
def process_image(stage):
    """Mimics the API Gateway proxy integration in front of the Lambda."""
    if stage != config.API_STAGE:
        return jsonify({"message": "Missing Authentication Token"}), 403

    result = lambda_handler(build_proxy_event(stage), None)
    return Response(
        result["body"],
        status=result["statusCode"],
        headers=result["headers"],
    )


# Same preflight settings as the deployed REST API. The POST responses carry
# their own CORS headers from the handler.
@app.route("/<stage>/process-image", methods=["OPTIONS"])
@cross_origin(
    origins="*",
    send_wildcard=True,
    methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Amz-Date", "Authorization", "X-Api-Key"],
)
def process_image_preflight(stage):
    return current_app.make_default_options_response()


def build_proxy_event(stage):
    raw = request.get_data()
    try:
        body = raw.decode("utf-8")
        is_b64 = False
    except UnicodeDecodeError:
        body = base64.b64encode(raw).decode("ascii")
        is_b64 = True

    return {
        "resource": "/process-image",
        "path": "/process-image",
        "httpMethod": request.method,
        "headers": dict(request.headers),
        "queryStringParameters": request.args.to_dict() or None,
        "requestContext": {"stage": stage, "httpMethod": request.method},
        "body": body if raw else None,
        "isBase64Encoded": is_b64,
    }


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "service": "textract-lambda"}), 200


def main():
    print("=" * 50)
    print("  Textract Lambda running on :%d" % config.SERVER_PORT)
    print("  POST /%s/process-image" % config.API_STAGE)
    print("  POST /2015-03-31/functions/textract/invocations")
    print("=" * 50)
    app.run(host=config.SERVER_HOST, port=config.SERVER_PORT)


if __name__ == "__main__":
    main()
