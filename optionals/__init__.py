from loguru import logger

from . import option
from . import problem
from . import util
from .option import Option
from .problem import InvalidArgument
from .problem import NoSuchElement
from .problem import Problem


# a library shouldn't emit logs unless asked, use `logger.enable("optionals")` to see them
logger.disable(__name__)

__all__ = ["InvalidArgument", "NoSuchElement", "Option", "Problem", "option", "problem", "util"]
