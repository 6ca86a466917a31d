"""Errors raised while loading or translating declaration trees."""

from __future__ import annotations


class TranslateError(Exception):
    """Base for errors that abort translation of a whole unit."""

    def __init__(self, msg: str):
        self.msg: str = msg
        super().__init__(msg)


class UnnameableTypeError(TranslateError):
    """A Class type reached the naming function.

    Classes are only nameable through their owning declaration.
    """

    def __init__(self, typ: object):
        self.typ: object = typ
        super().__init__("class types have no structural name")


class InvalidConstructorTargetError(TranslateError):
    """The constructor resolver was given something other than a Class."""

    def __init__(self, owner: str, typ: object):
        self.owner: str = owner
        self.typ: object = typ
        super().__init__(
            "cannot resolve constructor of '" + owner + "': not a class type"
        )


class LoadError(TranslateError):
    """Malformed interchange document. `path` is a dotted location."""

    def __init__(self, msg: str, path: str):
        self.path: str = path
        super().__init__(msg + " at " + (path if path else "<root>"))
