"""markdowndown — turn HTML pages and local files into normalized markdown."""

from markdowndown._version import __version__
from markdowndown.core.markdown_engine import convert_html_to_markdown
from markdowndown.core.markdown_engine.config import HtmlConverterConfig
from markdowndown.core.markdown_engine.postprocessor import postprocess_markdown
from markdowndown.core.markdown_engine.sanitizer import sanitize_html
from markdowndown.core.paths import is_local_file_path

__all__ = [
    "HtmlConverterConfig",
    "__version__",
    "convert_html_to_markdown",
    "is_local_file_path",
    "postprocess_markdown",
    "sanitize_html",
]
