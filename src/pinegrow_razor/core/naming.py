import re

_WORD_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def pascalize(name: str) -> str:
    """Convert a slug, snake or spaced name to a PascalCase identifier.

    Only the first letter of each word is touched, so ``heroBanner`` becomes
    ``HeroBanner`` and ``about-us`` becomes ``AboutUs``.
    """
    words = [word for word in _WORD_SEPARATORS.split(name) if word]
    return "".join(word[0].upper() + word[1:] for word in words)


def kebaberize(name: str) -> str:
    """Convert a name to lower-case words joined by dashes (``AboutUs`` -> ``about-us``)."""
    spaced = _ACRONYM_BOUNDARY.sub(r"\1-\2", name)
    spaced = _CAMEL_BOUNDARY.sub(r"\1-\2", spaced)
    words = [word for word in _WORD_SEPARATORS.split(spaced) if word]
    return "-".join(word.lower() for word in words)
