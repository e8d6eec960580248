from enum import Enum


class View(str, Enum):
    """Views a signed-in user can navigate between."""

    HOME = "home"
    IMAGE = "image"
    CHAT = "chat"
    TEMPLATES = "templates"


class Screen(str, Enum):
    """Everything the shell can be showing, including the auth gates."""

    LOADING = "loading"
    LOGIN = "login"
    HOME = "home"
    IMAGE = "image"
    CHAT = "chat"
    TEMPLATES = "templates"
