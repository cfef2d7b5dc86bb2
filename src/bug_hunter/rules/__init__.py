"""Rule sets, one module per supported language."""

from .c_family import analyze_c, analyze_cpp
from .csharp import analyze as analyze_csharp
from .css import analyze as analyze_css
from .go import analyze as analyze_go
from .html import analyze as analyze_html
from .java import analyze as analyze_java
from .javascript import analyze as analyze_javascript
from .php import analyze as analyze_php
from .python import analyze as analyze_python
from .ruby import analyze as analyze_ruby
from .rust import analyze as analyze_rust
from .typescript import analyze as analyze_typescript

__all__ = [
    "analyze_c",
    "analyze_cpp",
    "analyze_csharp",
    "analyze_css",
    "analyze_go",
    "analyze_html",
    "analyze_java",
    "analyze_javascript",
    "analyze_php",
    "analyze_python",
    "analyze_ruby",
    "analyze_rust",
    "analyze_typescript",
]
