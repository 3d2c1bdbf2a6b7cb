"""REST API routes for the ExiFrame web API."""

import logging
from io import BytesIO
from typing import Optional

from flask import Blueprint, current_app, jsonify, request, send_file

from ..._version import __version__
from ...exceptions import RenderError
from ...processing import build_exif_data, format_overlay

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_MIMETYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
}


def _read_upload() -> Optional[bytes]:
    """Return the bytes of the uploaded ``photo`` file, if any."""
    upload = request.files.get("photo")
    if upload is None:
        return None
    data = upload.read()
    return data or None


def _show_focal_length_in_35mm_film() -> bool:
    """Read the 35mm display flag from the form, falling back to config."""
    value = request.form.get("focal_length_35mm")
    if value is None:
        config = current_app.config["EXIFRAME_CONFIG"]
        return bool(config.get("frame.show_focal_length_in_35mm_film", False))
    return value.strip().lower() in ("1", "true", "yes", "on")


@api_bp.route("/health", methods=["GET"])
def health():
    """Report that the server is up."""
    return jsonify({"status": "ok", "version": __version__})


@api_bp.route("/exif", methods=["POST"])
def extract_exif():
    """Extract the metadata record and overlay text from an uploaded photo.

    Form data:
        photo: Image file
        focal_length_35mm: "true" to show the 35mm-equivalent focal length

    Returns:
        {"exif": record or null, "overlay": {...}}
    """
    data = _read_upload()
    if data is None:
        return jsonify({"error": "Missing 'photo' file in request"}), 400

    exif = build_exif_data(data)
    if exif is None:
        logger.info("Uploaded file could not be decoded as an image")

    overlay = format_overlay(exif, _show_focal_length_in_35mm_film())

    return jsonify({
        "exif": exif.to_dict() if exif else None,
        "overlay": overlay.to_dict(),
        "lines": overlay.lines,
    })


@api_bp.route("/frame", methods=["POST"])
def render_frame():
    """Render the framed image for an uploaded photo.

    Form data:
        photo: Image file
        focal_length_35mm: "true" to show the 35mm-equivalent focal length
        format: "PNG" (default) or "JPEG"

    Returns:
        Framed image
    """
    data = _read_upload()
    if data is None:
        return jsonify({"error": "Missing 'photo' file in request"}), 400

    config = current_app.config["EXIFRAME_CONFIG"]
    image_format = request.form.get(
        "format", config.get("frame.output_format", "PNG")
    ).upper()
    if image_format == "JPG":
        image_format = "JPEG"
    if image_format not in _MIMETYPES:
        return jsonify({"error": f"Unsupported format: {image_format}"}), 400

    renderer = current_app.config["EXIFRAME_RENDERER"]
    exif = build_exif_data(data)

    try:
        image = renderer.render(exif, _show_focal_length_in_35mm_film())
        encoded = renderer.export(image, image_format)
    except RenderError as e:
        logger.error(f"Failed to render framed image: {e}")
        return jsonify({"error": str(e)}), 500

    return send_file(
        BytesIO(encoded),
        mimetype=_MIMETYPES[image_format],
        download_name=f"exiframe.{image_format.lower().replace('jpeg', 'jpg')}",
    )
