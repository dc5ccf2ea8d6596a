"""chainboot — bootstrap and launch the error-propagation analyzer."""

__version__ = "0.1.0"
