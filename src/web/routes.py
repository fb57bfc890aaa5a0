"""Flask blueprint serving the deck form and the create endpoint."""

from __future__ import annotations

import logging
from pathlib import Path
from textwrap import dedent
from typing import Optional
from uuid import uuid4

from flask import Blueprint, current_app, jsonify, render_template_string, request
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from src.deck_generation.config import ServiceConfig
from src.deck_generation.errors import ErrorKind
from src.deck_generation.pipeline import run_deck_pipeline
from src.deck_generation.policies import LAYOUT_POLICIES
from src.deck_generation.slides_api import SlidesCloudService

logger = logging.getLogger(__name__)

deck_bp = Blueprint("deck", __name__)

CONFIG_KEY = "DECK_SERVICE_CONFIG"
SERVICE_EXTENSION = "deck_slides_service"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION.value: 400,
    ErrorKind.ASSET_MISSING.value: 500,
    ErrorKind.SHAPE_RESOLUTION.value: 502,
    ErrorKind.REMOTE_OPERATION.value: 502,
}

FORM_HTML = dedent(
    """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="utf-8" />
        <title>Create Presentation</title>
        <style>
            body { font-family: system-ui, Arial, sans-serif; margin: 24px; }
            label { font-weight: 600; display:block; margin-top: 12px; }
            .row { margin: 8px 0; }
            .btn { padding: 8px 12px; }
            .log { background: #f7f7f9; border: 1px solid #ddd; padding: 8px; margin-top: 12px; white-space: pre-wrap; }
        </style>
        <script>
        async function createDeck(e){
            e.preventDefault();
            const form = document.getElementById('deckForm');
            const log = document.getElementById('log');
            log.textContent = 'Building presentation...';
            const res = await fetch('{{ url_for("deck.create_presentation") }}', {
                method: 'POST', body: new FormData(form)
            });
            const data = await res.json();
            if(data.success){
                log.innerHTML = '';
                const a = document.createElement('a');
                a.href = data.downloadUrl; a.textContent = 'Download presentation';
                log.appendChild(a);
            } else {
                log.textContent = 'Error: ' + data.message;
            }
        }
        </script>
    </head>
    <body>
        <h2>Create Presentation</h2>
        <form id="deckForm" onsubmit="createDeck(event)" enctype="multipart/form-data">
            <label for="presentationName">Presentation name</label>
            <input id="presentationName" name="presentationName" placeholder="Deck.pptx" required />
            <label for="slideCount">Slide count</label>
            <input id="slideCount" name="slideCount" type="number" min="1" max="{{ max_slides }}" value="2" />
            <label for="layoutPolicy">Layout</label>
            <select id="layoutPolicy" name="layoutPolicy">
                {% for p in policies %}
                    <option value="{{ p }}" {% if p == default_policy %}selected{% endif %}>{{ p }}</option>
                {% endfor %}
            </select>
            <label for="slideImage">Image (optional)</label>
            <input id="slideImage" name="slideImage" type="file" accept="image/*" />
            <div class="row"><button class="btn" type="submit">Create</button></div>
        </form>
        <div id="log" class="log"></div>
    </body>
    </html>
    """
)


def _config() -> ServiceConfig:
    config = current_app.config.get(CONFIG_KEY)
    if config is None:
        config = ServiceConfig.from_env()
        current_app.config[CONFIG_KEY] = config
    return config


def _service() -> SlidesCloudService:
    service = current_app.extensions.get(SERVICE_EXTENSION)
    if service is None:
        service = SlidesCloudService(_config())
        current_app.extensions[SERVICE_EXTENSION] = service
    return service


def _save_upload(file: FileStorage) -> Path:
    upload_dir = Path(_config().upload_folder)
    upload_dir.mkdir(parents=True, exist_ok=True)
    filename = secure_filename(file.filename or "") or "upload"
    dest = upload_dir / f"{uuid4().hex[:8]}_{filename}"
    file.save(dest)
    return dest


@deck_bp.route("/")
def index():
    config = _config()
    return render_template_string(
        FORM_HTML,
        policies=sorted(LAYOUT_POLICIES),
        default_policy=config.default_policy,
        max_slides=config.max_slide_count,
    )


def _failure(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


@deck_bp.errorhandler(RequestEntityTooLarge)
def upload_too_large(exc: RequestEntityTooLarge):
    return _failure("Uploaded image is too large", 413)


@deck_bp.route("/create", methods=["POST"])
def create_presentation():
    upload: Optional[FileStorage] = request.files.get("slideImage")
    try:
        image_path = _save_upload(upload) if upload and upload.filename else None
    except OSError:
        logger.exception("Could not store uploaded image")
        return _failure("Could not store uploaded image", 500)

    try:
        outcome = run_deck_pipeline(
            request.form,
            image_path,
            config=_config(),
            service=_service(),
        )
    except Exception as exc:
        # Only bugs land here; domain failures come back as a tagged outcome.
        logger.exception("Presentation build crashed with untagged %s", type(exc).__name__)
        return _failure("Internal error while building the presentation", 500)

    if outcome.ok:
        return jsonify(outcome.to_json())
    return jsonify(outcome.to_json()), STATUS_BY_KIND.get(outcome.error_kind, 500)


@deck_bp.route("/healthz")
def healthz():
    return jsonify({"ok": True})


__all__ = ["deck_bp"]
