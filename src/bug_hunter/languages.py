"""Language registry and file extension mapping."""

import os
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .models import Bug
from .rules import (
    analyze_c,
    analyze_cpp,
    analyze_csharp,
    analyze_css,
    analyze_go,
    analyze_html,
    analyze_java,
    analyze_javascript,
    analyze_php,
    analyze_python,
    analyze_ruby,
    analyze_rust,
    analyze_typescript,
)

RuleSet = Callable[[str], list[Bug]]

LANGUAGE_REGISTRY: Mapping[str, RuleSet] = MappingProxyType({
    "javascript": analyze_javascript,
    "typescript": analyze_typescript,
    "python": analyze_python,
    "java": analyze_java,
    "cpp": analyze_cpp,
    "c": analyze_c,
    "csharp": analyze_csharp,
    "go": analyze_go,
    "rust": analyze_rust,
    "php": analyze_php,
    "ruby": analyze_ruby,
    "html": analyze_html,
    "css": analyze_css,
})

EXTENSION_LANGUAGE_MAP = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
}


def detect_language_from_extension(filename: str) -> Optional[str]:
    """Detect language based on file extension."""
    if not filename:
        return None
    _, ext = os.path.splitext(filename.lower())
    return EXTENSION_LANGUAGE_MAP.get(ext)
