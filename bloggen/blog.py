from flask import Blueprint, request, jsonify
from loguru import logger

from . import db
from .generator import generate_blog
from .models import BlogPost

blog_bp = Blueprint("blog", __name__)

BAD_REQUEST = "Please provide blogs as an array of { title, details }"


@blog_bp.post("/generate")
def generate():
    try:
        body = request.get_json(silent=True) or {}
        blogs = body.get("blogs") if isinstance(body, dict) else None
        if not isinstance(blogs, list):
            return jsonify(error=BAD_REQUEST), 400

        # one item at a time, in request order
        results = []
        for b in blogs:
            if not isinstance(b, dict):
                b = {}
            post = generate_blog(b.get("title"), b.get("details"))
            results.append(post.to_dict())
        return jsonify(results), 200
    except Exception:
        logger.exception("generate failed")
        db.session.rollback()
        return jsonify(error="Failed to generate blogs"), 500


@blog_bp.get("/blog")
def list_blogs():
    return jsonify([p.to_dict() for p in BlogPost.newest_first()])
