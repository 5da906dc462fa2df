import gettext
import os

_locale_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'locales')
_translation = gettext.translation('subdraft', localedir=_locale_dir, languages=[os.getenv('SUBDRAFT_LANGUAGE', 'en')], fallback=True)


def _(message : str) -> str:
    """Translate a user-facing message, returning it unchanged if no catalog is installed."""
    return _translation.gettext(message)
