from .errors import *
from .interpreter import *
from .misc import *
from .script import *
from .session import *
from .source import *
from .stack import *
from .values import *

_version_str = '0.1'
_version = tuple(int(part) for part in _version_str.split('.'))

__all__ = sum((
    errors.__all__,
    interpreter.__all__,
    misc.__all__,
    script.__all__,
    session.__all__,
    source.__all__,
    stack.__all__,
    values.__all__,
), ())
