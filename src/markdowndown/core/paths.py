"""Local file path detection — tells filesystem paths apart from URLs."""

from __future__ import annotations

KNOWN_URL_SCHEMES = (
    "data:",
    "javascript:",
    "mailto:",
    "ftp:",
    "tel:",
    "sms:",
    "http:",
    "https:",
)

COMMON_TLDS = frozenset({"com", "org", "net", "edu", "gov", "mil", "int", "io", "co"})

FILE_EXTENSIONS = frozenset({
    "md", "txt", "json", "xml", "yaml", "yml", "toml", "ini", "cfg", "conf",
    "py", "rs", "js", "ts", "html", "css", "java", "cpp", "c", "h",
    "pdf", "doc", "docx", "png", "jpg", "jpeg", "gif", "svg",
})

EXTENSIONLESS_FILENAMES = frozenset({
    "Makefile",
    "README",
    "LICENSE",
    "CHANGELOG",
    "CONTRIBUTING",
    "Dockerfile",
    "Vagrantfile",
    "Cargo",
    "package",
})

FILE_URL_PREFIX = "file://"


def is_local_file_path(value: str) -> bool:
    """Return True if *value* looks like a local path or ``file://`` URL.

    Recognizes absolute Unix paths, ``./`` and ``../`` relative paths, Windows
    drive paths, separator-bearing relative paths and bare filenames with a
    known extension. Bare domains such as ``example.com`` are rejected.
    """
    text = value.strip()
    if not text:
        return False

    if text.startswith(FILE_URL_PREFIX):
        return True

    # Unix absolute path; "//" is a protocol-relative URL
    if text.startswith("/") and not text.startswith("//"):
        return True

    if text.startswith(("./", "../")):
        return True

    if _is_windows_drive_path(text):
        return True

    has_separator = "/" in text or "\\" in text
    if "://" not in text and has_separator:
        if text.startswith("//") or text.startswith(KNOWN_URL_SCHEMES):
            return False
        return (
            not text.startswith("www.")
            and "://" not in text
            and (text.startswith(".") or has_separator)
        )

    if "://" in text or "www." in text or text.startswith("//"):
        return False
    if text.startswith(KNOWN_URL_SCHEMES):
        return False

    if " " in text:
        return False
    if "." in text:
        return _looks_like_filename(text)
    return text in EXTENSIONLESS_FILENAMES


def _is_windows_drive_path(text: str) -> bool:
    return (
        len(text) >= 3
        and text[0].isascii()
        and text[0].isalpha()
        and text[1] == ":"
        and text[2] in "\\/"
    )


def _looks_like_filename(text: str) -> bool:
    """Decide whether a dotted name without separators is a file or a domain."""
    parts = text.split(".")
    last = parts[-1]

    if len(parts) == 2 and last in COMMON_TLDS:
        return False
    if last in FILE_EXTENSIONS:
        return True
    return ".." not in text and text.count(".") <= 2 and last not in COMMON_TLDS


def normalize_file_path(value: str) -> str:
    """Turn a ``file://`` URL into a plain filesystem path.

    ``file:///abs/path`` becomes ``/abs/path`` and ``file://./rel.md`` becomes
    ``./rel.md``. Anything else is returned unchanged.
    """
    if not value.startswith(FILE_URL_PREFIX):
        return value
    if value.startswith(FILE_URL_PREFIX + "/"):
        return "/" + value[len(FILE_URL_PREFIX) + 1:]
    return value[len(FILE_URL_PREFIX):]
