"""Feature-name casing transforms.

Every generated file derives its folder name, type-name stem and route
constant from the raw feature name typed by the user.  The transforms are
total (empty or degenerate input yields an empty string) and deterministic:
nothing is cached, so the same input always yields the same names.

Examples::

    to_camel("Forget Password")      -> "forgetPassword"
    to_pascal("forget_password")     -> "ForgetPassword"
    to_snake("forgetPassword")       -> "forget_password"
    route_constant("Forget Password") -> "FORGET_PASSWORD_ROUTE"
"""

from __future__ import annotations

import re

ROUTE_SUFFIX = "_ROUTE"

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_WORD_BOUNDARY = re.compile(r"(?=[A-Z])|\s+")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")


def split_words(raw: str) -> list[str]:
    """Split *raw* into words on separators and uppercase-letter boundaries.

    Characters outside ``[A-Za-z0-9]`` act as separators and are dropped.
    """
    cleaned = _NON_ALNUM.sub(" ", raw).strip()
    return [word for word in _WORD_BOUNDARY.split(cleaned) if word]


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_camel(raw: str) -> str:
    """``"Forget Password"`` -> ``"forgetPassword"``."""
    words = split_words(raw)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize_first(w) for w in words[1:])


def to_pascal(raw: str) -> str:
    """``"forget password"`` -> ``"ForgetPassword"``."""
    return "".join(_capitalize_first(w) for w in split_words(raw))


def to_snake(raw: str) -> str:
    """Lower snake case: ``"forgetPassword"`` -> ``"forget_password"``.

    An underscore is inserted at every lowercase-to-uppercase boundary and
    runs of separator characters collapse to a single underscore.
    """
    with_boundaries = _LOWER_UPPER.sub(r"\1_\2", raw)
    snake = re.sub(r"[^a-zA-Z0-9]+", "_", with_boundaries).strip("_")
    return snake.lower()


def route_constant(raw: str) -> str:
    """Name of the route constant for a feature, e.g. ``HOME_ROUTE``."""
    return to_snake(to_camel(raw)).upper() + ROUTE_SUFFIX


def route_value(raw: str) -> str:
    """String value bound to the route constant, e.g. ``"home_route"``."""
    return f"{to_camel(raw)}_route"
