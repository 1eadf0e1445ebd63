"""
Page Rendering

Framework-independent rendering of the home page. The current user is
passed in explicitly; nothing is read from the request or session.
"""

from collections.abc import Mapping
from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader('shopfront', 'templates'),
    autoescape=select_autoescape(['html']),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_home(user=None):
    """Render the home page for ``user`` (None for an anonymous visitor).

    ``user`` may be a model instance or a mapping; only its ``email`` is
    read. The email is HTML-escaped by the template.
    """
    template = _env.get_template('home/index.html')
    return template.render(email=_email_of(user))


def _email_of(user):
    if not user or getattr(user, 'is_anonymous', False):
        return None
    if isinstance(user, Mapping):
        return user['email']
    return user.email
