from .distances import *
from .errors import *
from .search import *
