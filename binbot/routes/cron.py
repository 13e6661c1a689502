from flask import Blueprint, request, abort, jsonify, current_app

from binbot.config import ReminderSettings
from binbot.services.reminders import send_bin_reminder


cron_bp = Blueprint("cron", __name__, url_prefix="/cron")


def require_cron_secret():
    secret = request.headers.get("X-CRON-SECRET")
    if not secret or secret != current_app.config["CRON_SECRET"]:
        abort(401)


@cron_bp.post("/ping")
def ping():
    require_cron_secret()
    return jsonify({"ok": True})


@cron_bp.post("/send-bin-reminder")
def cron_send_bin_reminder():
    require_cron_secret()
    settings = ReminderSettings.from_config(current_app.config)
    result = send_bin_reminder(settings)
    current_app.logger.info("Bin reminder run: sent=%s error=%s", result.sent, result.error)
    return jsonify({
        "sent": result.sent,
        "message": result.message,
        "bin": result.bin_label,
        "error": result.error,
    })
