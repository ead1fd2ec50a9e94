"""
Errors raised by optionals. Every error is a Problem, which also mixes in the
closest builtin exception so callers can catch either.
"""


class ProblemMeta(type):
    """The Problem Metaclass, this will validate your Problems."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        # create the class
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate Problem
        if class_name == "Problem":
            return _cls

        # ensure required fields
        missing = []
        for key in ("title", "kind"):
            if key not in attrs:
                missing.append(key)

        if missing:
            fmt = "Can't build a Problem: {} is missing the field(s): {}"
            raise TypeError(fmt.format(class_name, ", ".join(missing)))

        # constructor
        def __init__(self, detail: str | None = None, context: dict | None = None):
            self.detail = detail or "No detail provided"
            self.context = context
            super(_cls, self).__init__(self.detail)

        # make it printable
        def __str__(self):
            fmt = "<{}(kind='{}', title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.kind, self.title, self.detail)

        # serializer
        def to_dict(self) -> dict:
            data = {
                "title": self.title,  # a generic one liner about the issue
                "kind": self.kind,  # a stable slug, safe to match on
                "detail": self.detail,  # a more contextual one liner about the issue
            }

            # if provided, additional data for debugging, etc...
            if self.context:
                data["context"] = self.context

            return data

        # bolt methods on and return class
        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.to_dict = to_dict
        return _cls


class Problem(Exception, metaclass=ProblemMeta):
    """The Problem base class, extend this to build new Problems.

    class EmailMissing(Problem):
        title="The Person has no email address"
        kind="email-missing"

    person.email.or_else_throw(lambda: EmailMissing(person.name))
    """


class InvalidArgument(Problem, ValueError):
    """Raised when a caller breaks a precondition, e.g. `Option.of(None)`.

    This is a programmer error, don't catch it, fix the call site.
    """

    title = "An invalid argument was provided."
    kind = "invalid-argument"


class NoSuchElement(Problem, LookupError):
    """Raised when unwrapping an empty Option.

    Prefer `Option.or_else`, `Option.or_else_get` or `Option.if_present_or_else`
    over catching this.
    """

    title = "The Option did not contain a value."
    kind = "no-such-element"
