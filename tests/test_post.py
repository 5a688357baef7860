import datetime

from hexo_front_matter import Post, dumps, loads


def test_loads() -> None:
    post = loads("title: Hello\ndate: 2014-01-02 03:04:05\n---\nbody")
    assert post.content == "body"
    assert post["title"] == "Hello"
    assert post.get("date") == datetime.datetime(2014, 1, 2, 3, 4, 5)
    assert "title" in post
    assert "_content" not in post
    assert post.get("missing") is None
    assert post.get("missing", 1) == 1
    assert list(post.keys()) == ["title", "date"]


def test_loads_no_front_matter() -> None:
    post = loads("just text")
    assert post.content == "just text"
    assert post.metadata == {}


def test_loads_content_key_clash() -> None:
    post = loads("content: x\n---\nbody")
    assert post.content == "body"
    assert post["content"] == "x"


def test_post_mutation() -> None:
    post = Post("body", title="Hello")
    post["draft"] = True
    del post["title"]
    assert post.to_dict() == {"draft": True, "_content": "body"}


def test_dumps() -> None:
    post = Post("body", title="Hello")
    assert dumps(post) == "title: Hello\n---\nbody"
    assert dumps(post, prefix_separator=True) == "---\ntitle: Hello\n---\nbody"
    assert dumps(post, mode="json") == '"title": "Hello"\n;;;\nbody'

    assert dumps(Post("body")) == "body"


def test_loads_dumps_round_trip() -> None:
    s = "---\ntitle: Hello\ntags:\n- a\n- b\n---\nbody\n"
    assert dumps(loads(s), prefix_separator=True) == s
