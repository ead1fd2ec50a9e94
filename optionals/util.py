import dataclasses
import os

from .option import Option


def env_option(key, convert=str, **kwargs):
    """
    A factory around `dataclasses.field` that can be used to load an optional
    envvar into an Option. If you wish to load from an external source, do
    that first and inject it's keys/values into os.environ before
    instantiating your dataclass.

    Args:
        key: in the format of either KEY or KEY:DEFAULT
        convert: a function that accepts a string and returns a different type
        kwargs: any kwargs to be passed to `dataclasses.field`

    Returns:
        dataclasses.field, producing Option.of(convert(value)) when the envvar
        (or a default) is available, otherwise Option.empty()
    """
    key, partition, default = key.partition(":")

    def default_factory(key=key, default=default, convert=convert):
        if key in os.environ:
            return Option.of(convert(os.environ[key]))

        # if a partition was detected use anything after it, even an empty string
        if partition == ":":
            return Option.of(convert(default))

        return Option.empty()

    return dataclasses.field(default_factory=default_factory, **kwargs)
