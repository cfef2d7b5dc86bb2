#!/usr/bin/env python3
"""
Sandbox entrypoint for bug-hunter.
Reads code (or file paths) from stdin JSON, scans for bugs, outputs JSON to stdout.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from bug_hunter.analyzer import analyze, list_supported_languages, summarize
from bug_hunter.config import Settings
from bug_hunter.languages import detect_language_from_extension

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _fail(payload: dict[str, Any]) -> None:
    print(json.dumps(payload))
    sys.exit(1)


def _read_file(file_path: str) -> tuple[str, Optional[str]]:
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as handle:
            return handle.read(), None
    except FileNotFoundError:
        return "", f"File not found: {file_path}"
    except PermissionError:
        return "", f"Permission denied: {file_path}"
    except OSError as e:
        return "", f"Failed to read file: {file_path} ({e})"


def _analyze_files(files: list[dict], language: Optional[str], max_code_bytes: int) -> dict[str, Any]:
    results = []
    all_bugs = []
    for entry in files:
        file_path = entry.get("path", "")
        name = entry.get("original_name") or Path(file_path).name
        file_language = language or detect_language_from_extension(name)

        if not file_language:
            results.append({"file": name, "error": "Could not detect language from file extension"})
            continue

        code, error = _read_file(file_path)
        if error:
            results.append({"file": name, "error": error})
            continue
        if len(code.encode("utf-8")) > max_code_bytes:
            results.append({"file": name, "error": f"File exceeds maximum size of {max_code_bytes} bytes"})
            continue

        result = analyze(code, file_language)
        all_bugs.extend(result.bugs)
        results.append({
            "file": name,
            "language": file_language,
            **result.model_dump(mode="json", by_alias=True),
        })

    return {
        "files": results,
        "summary": summarize(all_bugs).model_dump(),
    }


def main() -> None:
    try:
        input_data = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        _fail({"error": f"Invalid JSON input: {e}"})

    if not isinstance(input_data, dict):
        _fail({"error": "Input must be a JSON object"})

    settings = Settings.from_env()
    language = input_data.get("language")

    warning = None
    if language and language not in list_supported_languages():
        warning = f"Unsupported language '{language}', no rules applied"
        logger.info(warning)

    # Support multiple input formats:
    # - files: List of file objects, language optional
    # - code: Raw code string with its language
    files = input_data.get("files")
    if isinstance(files, list) and files:
        output = _analyze_files(files, language, settings.max_code_bytes)
        if warning:
            output["warning"] = warning
        print(json.dumps(output))
        return

    code = input_data.get("code")
    if not code or not language:
        _fail({
            "error": "Missing required input. Provide 'code' and 'language', or 'files' (array).",
            "examples": {
                "code": {"code": "var x = 1;", "language": "javascript"},
                "files": {"files": [{"path": "/tmp/app.py", "original_name": "app.py"}]},
            },
        })

    if len(code.encode("utf-8")) > settings.max_code_bytes:
        _fail({"error": f"Code exceeds maximum size of {settings.max_code_bytes} bytes"})

    try:
        result = analyze(code, language)
        output = {"language": language, **result.model_dump(mode="json", by_alias=True)}
        if warning:
            output["warning"] = warning
        print(json.dumps(output))
    except Exception as e:
        logger.error(f"Analysis failed: {e}")
        _fail({"error": f"Analysis failed: {e}"})


if __name__ == "__main__":
    main()
