"""cmake-init command line interface."""
