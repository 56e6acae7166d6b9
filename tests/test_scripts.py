import json

from bloggen import db
from bloggen.models import BlogPost, FAILED_CONTENT
from bloggen.scripts import check_blogs, generate_blogs


def test_generate_from_list_file(app, chat, tmp_path, capsys):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps([{"title": "Loops", "details": "for/while"}, {"title": "Dicts"}]))
    chat.replies = ["loops post", RuntimeError("quota")]

    assert generate_blogs.main([str(path)], app=app) == 0
    out = json.loads(capsys.readouterr().out)
    assert [p["title"] for p in out] == ["Loops", "Dicts"]
    assert out[1]["content"] == FAILED_CONTENT
    with app.app_context():
        assert BlogPost.query.count() == 2


def test_generate_accepts_blogs_wrapper(app, tmp_path, capsys):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps({"blogs": [{"title": "Sets", "details": ""}]}))
    assert generate_blogs.main([str(path)], app=app) == 0
    assert json.loads(capsys.readouterr().out)[0]["title"] == "Sets"


def test_generate_rejects_bad_input(app, tmp_path):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps({"blogs": "nope"}))
    assert generate_blogs.main([str(path)], app=app) == 1
    assert generate_blogs.main([str(tmp_path / "missing.json")], app=app) == 1


def test_check_reports_failed_posts(app, capsys):
    with app.app_context():
        db.session.add(BlogPost(title="ok", details="", content="fine"))
        db.session.add(BlogPost(title="broken", details="", content=FAILED_CONTENT))
        db.session.commit()

    assert check_blogs.main(app=app) == 0
    out = capsys.readouterr().out
    assert "Total: 2" in out
    assert "Failed: 1" in out
    assert "broken" in out
