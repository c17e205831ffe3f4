"""cmake-init: the missing CMake project initializer."""

__version__ = "0.1.0"
