"""Flask HTTP server for the uidgen service.

This module implements the HTTP server with routes for identifier generation
and for inspecting the active generator configuration.
"""

import logging
from flask import Flask, Response, jsonify, request

from uidgen.encoder import encode
from uidgen.errors import UIDGenError
from uidgen.generator import UIDGenerator
from uidgen.settings import Settings

# Configure logging
logger = logging.getLogger(__name__)


def create_app(settings: Settings, generator: UIDGenerator) -> Flask:
    """Create and configure Flask application.

    Args:
        settings: Service settings
        generator: Generator used for every request

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def health_check():
        """Health check endpoint.

        GET / - Health check

        Returns:
            200: OK
        """
        return Response("OK\n", status=200, mimetype="text/plain")

    @app.route("/uid", methods=["GET"])
    def generate_uids():
        """Handle identifier generation requests.

        GET /uid?count=N - Generate N identifiers, one per line (default: 1)

        Returns:
            200: Identifiers as plain text
            400: Bad request (invalid count)
            413: Count above max_batch_size
            500: Internal server error
            503: Service unavailable (random source failed)
        """
        raw_count = request.args.get("count", "1")
        try:
            count = int(raw_count)
        except ValueError:
            logger.info(f"Invalid count rejected: {raw_count!r}")
            return Response(
                "Bad Request: count must be an integer\n",
                status=400,
                mimetype="text/plain",
            )

        if count < 1:
            logger.info(f"Non-positive count rejected: {count}")
            return Response(
                "Bad Request: count must be at least 1\n",
                status=400,
                mimetype="text/plain",
            )

        if count > settings.max_batch_size:
            logger.warning(f"Batch too large: {count} > {settings.max_batch_size}")
            return Response(
                f"Payload Too Large: Maximum count is {settings.max_batch_size}\n",
                status=413,
                mimetype="text/plain",
            )

        # Source failures are opaque, so any error from it is a 503
        try:
            buffers = [generator.random_bytes() for _ in range(count)]
        except Exception as e:
            logger.error(f"Random source failed: {e!r}")
            return Response(
                "Service unavailable: Random source failed\n",
                status=503,
                mimetype="text/plain",
            )

        try:
            uids = [encode(generator.config, data) for data in buffers]
        except UIDGenError as e:
            logger.error(f"Identifier encoding failed: {e}")
            return Response(
                "Internal Server Error: Failed to encode identifier\n",
                status=500,
                mimetype="text/plain",
            )
        except Exception as e:
            logger.exception(f"Unexpected error generating identifiers: {e}")
            return Response(
                "Internal Server Error: An unexpected error occurred\n",
                status=500,
                mimetype="text/plain",
            )

        logger.debug(f"Generated {count} identifier(s)")
        return Response("\n".join(uids) + "\n", status=200, mimetype="text/plain")

    @app.route("/config", methods=["GET"])
    def show_config():
        """Describe the active generator configuration.

        GET /config - Alphabet, base, bit size, byte count and uid length

        Returns:
            200: JSON object
        """
        return jsonify(
            alphabet=generator.alphabet,
            base=generator.base,
            bit_size=generator.bit_size,
            byte_count=generator.byte_count,
            uid_length=generator.uid_length,
        )

    return app


def run_server(settings: Settings, generator: UIDGenerator) -> None:
    """Run the Flask HTTP server.

    Args:
        settings: Service settings
        generator: Generator used for every request
    """
    app = create_app(settings, generator)

    logger.info(f"Starting HTTP server on all interfaces, port {settings.listen_port}")
    app.run(host="0.0.0.0", port=settings.listen_port, debug=False)  # nosec B104
