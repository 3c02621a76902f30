"""Track RFID-tagged belongings: tag decoding, registry, settings and screen flow."""

__version__ = "0.1.0"