from types import SimpleNamespace

import pytest
from flask_login import AnonymousUserMixin

from shopfront.views import render_home


NAV_LINKS = ('href="/login"', 'href="/products/create"', 'href="/dashboard"')


@pytest.mark.parametrize('user', [None, AnonymousUserMixin()])
def test_anonymous_visitor(user):
    html = render_home(user)
    assert 'You are not logged in' in html
    assert '/logout' not in html
    assert 'Hello,' not in html


def test_logged_in_user():
    html = render_home(SimpleNamespace(email='a@example.com'))
    assert 'Hello, a@example.com!' in html
    assert 'href="/logout"' in html
    assert 'You are not logged in' not in html


def test_mapping_user():
    html = render_home({'email': 'a@example.com', 'name': 'Demo User'})
    assert 'Hello, a@example.com!' in html


@pytest.mark.parametrize('user', [None, SimpleNamespace(email='a@example.com')])
def test_navigation_links_always_present(user):
    html = render_home(user)
    for link in NAV_LINKS:
        assert link in html


def test_email_is_escaped():
    html = render_home(SimpleNamespace(email='<script>@x.com'))
    assert '&lt;script&gt;@x.com' in html
    assert '<script>' not in html


def test_quotes_and_ampersand_are_escaped():
    html = render_home(SimpleNamespace(email='o\'neil&"co"@x.com'))
    assert 'o&#39;neil&amp;&#34;co&#34;@x.com' in html


def test_rendering_is_deterministic():
    user = SimpleNamespace(email='a@example.com')
    assert render_home(user) == render_home(user)
    assert render_home() == render_home(None)


def test_document_shape():
    html = render_home()
    assert html.startswith('<!doctype html>')
    assert '<meta charset="utf-8">' in html
