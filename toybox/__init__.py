"""Small games, physics simulations, a grep tool and a thread pool."""

__version__ = "0.1.0"