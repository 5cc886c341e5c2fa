from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote blog seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog.domain.errors import ValidationError
from blog.domain.post import Post


def test_new_post_has_no_id():
    post = Post.new("Hello", "hello", "World")
    assert post.id is None
    post.validate()


@pytest.mark.parametrize(
    "title, slug, body, message",
    [
        ("", "hello", "World", "Title cannot be empty"),
        ("   ", "hello", "World", "Title cannot be empty"),
        ("Hello", " \t", "World", "Slug cannot be empty"),
        ("Hello", "hello", "\n", "Body cannot be empty"),
        ("", "", "", "Title cannot be empty"),
    ],
)
def test_validate_rejects_blank_fields(title, slug, body, message):
    with pytest.raises(ValidationError, match=message):
        Post.new(title, slug, body).validate()


def test_update_keeps_id_and_slug():
    post = Post.with_id(7, "Hello", "hello", "World")
    post.update("Hello2", "World2")
    assert post == Post.with_id(7, "Hello2", "hello", "World2")


def test_to_dict_has_all_fields():
    post = Post.with_id(3, "t", "s", "b")
    assert post.to_dict() == {"id": 3, "title": "t", "slug": "s", "body": "b"}
