from .songlink import *
