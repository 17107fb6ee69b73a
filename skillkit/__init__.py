"""skillkit - install and manage agent skill bundles"""

__version__ = "0.1.0"
