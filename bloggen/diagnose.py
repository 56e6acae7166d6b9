# bloggen/diagnose.py
from flask import Blueprint, current_app, request, jsonify
from sqlalchemy import text as sql_text
import hmac

from . import db

diagnose_bp = Blueprint("diagnose", __name__)


def _sec_eq(a: str, b: str) -> bool:
    try:
        return hmac.compare_digest((a or "").strip(), (b or "").strip())
    except Exception:
        return False


def _check_token(req) -> bool:
    t = current_app.config.get("DIAGNOSE_TOKEN") or ""
    if not t:
        return True
    presented = (
        (req.headers.get("X-Token") or "").strip()
        or (req.args.get("token") or "").strip()
    )
    return _sec_eq(t, presented)


@diagnose_bp.get("/diagnose")
def diagnose():
    if not _check_token(request):
        return jsonify(error="unauthorized"), 401

    cfg = current_app.config
    out = {
        "env": {
            "HF_TOKEN_present": bool(cfg.get("HF_TOKEN")),
            "OPENAI_KEY_present": bool(cfg.get("OPENAI_API_KEY")),
            "LLM_BACKEND": cfg.get("LLM_BACKEND"),
            "MODEL_NAME": cfg.get("MODEL_NAME"),
            "DATABASE_URL_present": bool(cfg.get("DATABASE_URL_SET")),
        },
        "db_ok": False,
    }

    try:
        db.session.execute(sql_text("SELECT 1"))
        out["db_ok"] = True
    except Exception as e:
        db.session.rollback()
        out["db_ok"] = f"error: {e}"

    return jsonify(out), 200
