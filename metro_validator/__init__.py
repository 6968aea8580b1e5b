"""Metro Validator: integrity checks for metro network data."""

__version__ = "1.0.0"
