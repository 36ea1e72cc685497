from .cache import *
from .errors import *
from .network import *
from .regex import *
