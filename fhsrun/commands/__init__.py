from .resolve import resolve
from .scan import scan
from .locate import locate
from .config import config
from .log import log
from .version import version
