"""Flask host exposing /health and /webhook.

The app holds only the configuration dict captured at creation time; every
webhook call runs the pipeline with its own local state.
"""

from __future__ import annotations

from flask import Flask, jsonify, request

from prcritic_core.models import WebhookEnvelope
from prcritic_core.webhook.handler import handle_webhook


def create_app(config: dict) -> Flask:
    app = Flask(__name__)
    app.config["PRCRITIC"] = config

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "message": "Bot is running"})

    @app.post("/webhook")
    def webhook():
        # get_data() must run before anything touches request.json so the
        # signature is checked against the exact bytes GitHub signed.
        envelope = WebhookEnvelope(
            body=request.get_data(cache=True),
            signature=request.headers.get("X-Hub-Signature-256"),
            event=request.headers.get("X-GitHub-Event"),
        )
        result = handle_webhook(envelope, app.config["PRCRITIC"])
        return jsonify(result.body), result.status_code

    return app
