import logging

from flask import Flask, request, jsonify, current_app

import sheets
from config import Settings, LOG_LEVEL
from sheets import SignupRecord, ConfigurationError

logging.basicConfig(level=LOG_LEVEL,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# ----------------------------------------------
# Flask
# ----------------------------------------------
app = Flask(__name__)

# Every verb is routed to the view so non-POST gets the JSON 405 below
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

MSG_MISSING_ENV = "Missing environment variables. Please check Vercel settings."
MSG_PERMISSION = "Permission denied. Please share the sheet with the service account email."
MSG_NOT_FOUND = "Sheet not found. Please check the GOOGLE_SHEET_ID."
MSG_GENERIC = "Failed to save data"


# ----------------------------------------------
# Helpers
# ----------------------------------------------
def _settings() -> Settings:
    """Injected settings win; otherwise env is read fresh for each request."""
    return current_app.config.get("SETTINGS") or Settings.from_env()


def classify_error(exc: Exception) -> str:
    """Pick the user-facing message for a failed save."""
    if isinstance(exc, ConfigurationError):
        return MSG_MISSING_ENV

    status = getattr(exc, "status_code", None)
    if status == 403:
        return MSG_PERMISSION
    if status == 404:
        return MSG_NOT_FOUND

    # Fallback for errors without a usable status
    text = str(exc)
    if "PERMISSION_DENIED" in text or "permission" in text:
        return MSG_PERMISSION
    if "not found" in text or "404" in text:
        return MSG_NOT_FOUND
    return MSG_GENERIC


@app.errorhandler(405)
def method_not_allowed(e):
    # Verbs outside ALL_METHODS are rejected by the router before the view runs
    return jsonify({"error": "Method not allowed"}), 405


# ============================================================
# WAITLIST
# ============================================================
@app.route("/", methods=ALL_METHODS, provide_automatic_options=False)
@app.route("/api/submit-waitlist", methods=ALL_METHODS, provide_automatic_options=False)
def submit_waitlist():
    if request.method != "POST":
        return jsonify({"error": "Method not allowed"}), 405

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}

    record = SignupRecord.from_payload(data)
    if not record.email or not record.username:
        return jsonify({"error": "Email and username are required"}), 400

    settings = _settings()
    try:
        sheets.save_signup(settings, record)
    except Exception as e:
        logger.exception("Error saving to Google Sheets")
        logger.error("Error details: %s", {
            "message": str(e),
            "code": getattr(e, "status_code", None),
            "sheetId": settings.sheet_id,
            **settings.presence(),
        })
        return jsonify({
            "error": classify_error(e),
            "details": str(e),
        }), 500

    return jsonify({"success": True, "message": "Data saved successfully"}), 200


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
