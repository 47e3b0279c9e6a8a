from importlib import metadata

try:
    __version__ = metadata.version("bizdesk")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from bizdesk import __version__
