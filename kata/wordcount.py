"""Count lines, words and bytes in files or standard input."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Sequence, TextIO

BUF_SIZE = 1024 * 1024

_SPACE_BYTES = frozenset(b" \n\t\v\r")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_FLAG_FIELDS = {"l": "show_lines", "w": "show_words", "c": "show_chars"}


class WordCountError(Exception):
    """Raised when arguments, paths or input cannot be processed."""


@dataclass
class FileResult:
    """Counts for one input, or the error that prevented counting it."""

    path: str
    lines: int = 0
    words: int = 0
    chars: int = 0
    error: Exception | None = None


@dataclass
class Options:
    """Which counts to show."""

    show_lines: bool = False
    show_words: bool = False
    show_chars: bool = False


def is_space(b: int) -> bool:
    return b in _SPACE_BYTES


def count_file_items(stream: BinaryIO) -> tuple[int, int, int]:
    """Return (lines, words, bytes) read from a binary stream until EOF."""
    lines = words = chars = 0
    in_word = False
    while chunk := stream.read(BUF_SIZE):
        chars += len(chunk)
        lines += chunk.count(b"\n")
        for b in chunk:
            if b in _SPACE_BYTES:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return lines, words, chars


def validate_file_path(path: str) -> None:
    """Raise WordCountError unless path names an existing non-directory."""
    try:
        info = os.stat(path)
    except FileNotFoundError:
        raise WordCountError(f"{path}: no such file exist") from None
    except PermissionError:
        raise WordCountError(f"{path}: permission denied") from None
    except OSError as err:
        raise WordCountError(f"{path}: {err.strerror or err}") from None
    if os.path.isdir(path) and os.stat(path).st_mode == info.st_mode:
        raise WordCountError(f"{path}: is a directory")


def process_file(path: str) -> FileResult:
    """Count one file; failures are recorded on the result, not raised."""
    result = FileResult(path=path)
    try:
        validate_file_path(path)
    except WordCountError as err:
        result.error = err
        return result

    try:
        handle = open(path, "rb")
    except OSError as err:
        result.error = WordCountError(f"opening file: {err}")
        return result

    with handle:
        try:
            result.lines, result.words, result.chars = count_file_items(handle)
        except OSError as err:
            result.error = err
    return result


def process_files(paths: Sequence[str]) -> list[FileResult]:
    """Count several files concurrently, one result per path in order."""
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=os.cpu_count() or 1) as pool:
        return list(pool.map(process_file, paths))


def process_stdin(stream: BinaryIO) -> FileResult:
    try:
        lines, words, chars = count_file_items(stream)
    except OSError as err:
        raise WordCountError(f"error reading stdin: {err}") from err
    return FileResult(path="", lines=lines, words=words, chars=chars)


def format_result(
    lines: int, words: int, chars: int, path: str, options: Options
) -> str:
    """Render one output line, without its trailing newline."""
    fields = [
        (options.show_lines, lines),
        (options.show_words, words),
        (options.show_chars, chars),
    ]
    counts = "".join(f"{value:8d} " for shown, value in fields if shown)
    return f"{counts}{path}"


def calculate_total(results: Iterable[FileResult | None]) -> FileResult:
    total = FileResult(path="total")
    for result in results:
        if result is not None:
            total.lines += result.lines
            total.words += result.words
            total.chars += result.chars
    return total


def _parse_bool(text: str, name: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise WordCountError(f'invalid boolean value "{text}" for -{name}: parse error')


def parse_flags(args: Sequence[str]) -> tuple[Options, list[str]]:
    """Parse -l, -w and -c; return the options and the remaining paths."""
    options = Options()
    args = list(args)
    index = 0
    while index < len(args):
        arg = args[index]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        index += 1
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise WordCountError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")
        field = _FLAG_FIELDS.get(name)
        if field is None:
            if name in ("h", "help"):
                raise WordCountError("flag: help requested")
            raise WordCountError(f"flag provided but not defined: -{name}")
        setattr(options, field, _parse_bool(value, name) if has_value else True)

    if not (options.show_lines or options.show_words or options.show_chars):
        options = Options(show_lines=True, show_words=True, show_chars=True)
    return options, args[index:]


def run(
    args: Sequence[str],
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Count the named files, or standard input when none are named."""
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        options, paths = parse_flags(args)
    except WordCountError as err:
        raise WordCountError(f"error parsing arguments: {err}") from err

    if not paths:
        try:
            result = process_stdin(stdin)
        except WordCountError as err:
            raise WordCountError(f"error processing stdin: {err}") from err
        line = format_result(result.lines, result.words, result.chars, "\n", options)
        print(line, file=stdout)
        return

    results = process_files(paths)
    for result in results:
        if result.error is not None:
            print(result.error, file=stderr)
            continue
        line = format_result(
            result.lines, result.words, result.chars, result.path, options
        )
        print(line, file=stdout)

    if len(paths) > 1:
        total = calculate_total(results)
        line = format_result(total.lines, total.words, total.chars, total.path, options)
        print(line, file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        run(args)
    except WordCountError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())