# numdiff/version.py
# Version constant. Single authoritative definition.
# Referenced by the CLI (--version) and by pyproject.toml via setuptools
# dynamic metadata.

NUMDIFF_VERSION: str = "1.0.0"
