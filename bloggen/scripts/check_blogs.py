# bloggen/scripts/check_blogs.py
import sys

from bloggen import create_app, db
from bloggen.models import BlogPost, FAILED_CONTENT


def main(app=None) -> int:
    app = app or create_app()
    with app.app_context():
        total = db.session.query(BlogPost).count()
        failed = db.session.query(BlogPost)\
            .filter(BlogPost.content == FAILED_CONTENT)\
            .order_by(BlogPost.created_at.desc()).all()
        print(f"Total: {total}")
        print(f"Failed: {len(failed)}")
        for p in failed:
            print("-", p.id, "|", (p.title or "")[:80])
    return 0

if __name__ == "__main__":
    sys.exit(main())
