"""Serialize values to CBOR and seal them with XChaCha20-Poly1305 shared-key encryption."""

__version__ = "0.1.0"