# A python-frontmatter flavored facade over parse() and stringify(), for
# callers that prefer keeping the body apart from the metadata.

from typing import Any, Iterable

import yaml

from .parser import CONTENT_KEY, parse
from .stringify import stringify


class Post:
    def __init__(self, content: str, **metadata: Any) -> None:
        self.content = content
        self.metadata: dict[str, Any] = metadata

    def __getitem__(self, name: str) -> Any:
        return self.metadata[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.metadata[name] = value

    def __delitem__(self, name: str) -> None:
        del self.metadata[name]

    def __contains__(self, item: object) -> bool:
        return item in self.metadata

    def __repr__(self) -> str:
        return f"Post({self.content!r}, **{self.metadata!r})"

    def get(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def keys(self) -> Iterable[str]:
        return self.metadata.keys()

    def to_dict(self) -> dict[str, Any]:
        d = dict(self.metadata)
        d[CONTENT_KEY] = self.content
        return d


def loads(s: str, *, loader: type[Any] = yaml.SafeLoader) -> Post:
    data = parse(s, loader=loader)
    post = Post(data.pop(CONTENT_KEY))
    post.metadata.update(data)
    return post


def dumps(post: Post, **kwargs: Any) -> str:
    return stringify(post.metadata, post.content, **kwargs)
