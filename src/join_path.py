"""Utility for joining manifest-relative paths onto a directory."""


def join_path(base: str, relative: str) -> str:
    """Join a relative path onto base, dropping trailing slashes."""
    joined = f"{base.rstrip('/')}/{relative}".rstrip("/")
    return joined or "/"
