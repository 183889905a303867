import gettext
import os

locale_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'locales')

_translation = gettext.translation('pysubstudy', localedir=locale_dir, fallback=True)

def _(message : str) -> str:
    """
    Translate a user-facing message into the current locale (messages are returned unchanged if no catalog is installed)
    """
    return _translation.gettext(message)
