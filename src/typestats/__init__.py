from typestats.consts import VERSION

__version__ = VERSION
