"""ChaCha20 encryption folded into a 64-byte Merkle-tree digest, with meta-file tools."""

__version__ = "0.1.0"
__all__ = ["chacha", "merkle", "core", "meta", "runner", "generator"]