"""Parser for plain-text .http request files."""

import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from loguru import logger

from ..conversion.data_models import Header, RequestRecord
from ..core.conversion_report import ConversionReport
from ..core.errors import ConversionError, RequestFormatError
from ..utils.constants import REQUEST_DELIMITER, REQUEST_NAME_PREFIX


_DELIMITER_LINE = re.compile(r"^[ \t]*" + re.escape(REQUEST_DELIMITER) + r"[ \t]*$", re.MULTILINE)


def split_headers_and_body(
    lines: Sequence[str],
    source: str = "<string>",
    report: Optional[ConversionReport] = None,
) -> Tuple[List[Header], str]:
    """
    Partition the lines after the request line into headers and body.

    The first blank line ends the headers and is itself dropped. Header
    lines without a colon are logged and dropped. Everything after the
    blank line is body, kept verbatim except for leading blank lines.
    """
    headers: List[Header] = []
    body_lines: List[str] = []
    headers_ended = False

    for line in lines:
        if headers_ended:
            body_lines.append(line)
            continue
        stripped = line.strip()
        if not stripped:
            headers_ended = True
            continue
        key, sep, value = stripped.partition(":")
        if not sep:
            message = f"Invalid header format: {stripped}"
            if report is not None:
                report.record_warning(source, message)
            else:
                logger.warning(f"{source}: {message}")
            continue
        headers.append(Header(key=key.strip(), value=value.strip()))

    while body_lines and not body_lines[0].strip():
        body_lines.pop(0)
    return headers, "\n".join(body_lines)


def _trim_blank_lines(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


class RequestFileParser:
    """
    Parse request files into RequestRecords.

    A file is a sequence of blocks separated by ``###`` lines. Each block is::

        # <name>
        <METHOD> <URL>
        <Header>: <value>

        <body>
    """

    def __init__(self, report: Optional[ConversionReport] = None):
        """
        Initialize RequestFileParser.

        Args:
            report: Report that records skipped blocks and warnings
        """
        self.report = report if report is not None else ConversionReport(operation="parse")

    def parse_file(self, file_path: Union[str, Path]) -> List[RequestRecord]:
        """
        Read and parse one request file.

        Raises:
            RequestFormatError: If the file is not valid UTF-8
            ConversionError: If the file cannot be read
        """
        file_path = Path(file_path)
        try:
            with open(file_path, "r", encoding="utf-8-sig") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise RequestFormatError(f"File is not valid UTF-8: {e}", str(file_path)) from e
        except OSError as e:
            raise ConversionError(f"Could not read request file: {e}", str(file_path)) from e

        return self.parse_text(content, source=str(file_path))

    def parse_text(self, content: str, source: str = "<string>") -> List[RequestRecord]:
        """Parse the text of one request file; invalid blocks are skipped."""
        content = content.replace("\r\n", "\n").replace("\r", "\n")
        records: List[RequestRecord] = []

        for index, block in enumerate(_DELIMITER_LINE.split(content), start=1):
            lines = _trim_blank_lines(block.split("\n"))
            if not lines:
                continue
            try:
                records.append(self.parse_block(lines, source))
            except RequestFormatError as e:
                self.report.record_skip("block", source, f"block {index}: {e.message}")

        logger.debug(f"Parsed {len(records)} request(s) from {source}")
        return records

    def parse_block(self, lines: Sequence[str], source: str = "<string>") -> RequestRecord:
        """
        Parse one trimmed, non-empty block.

        Raises:
            RequestFormatError: If the name or request line is missing or malformed
        """
        if len(lines) < 2:
            raise RequestFormatError("Invalid HTTP request format: expected a name line and a request line")
        name_line = lines[0].strip()
        if not name_line.startswith(REQUEST_NAME_PREFIX):
            raise RequestFormatError(f"Invalid HTTP request format: name line must start with '{REQUEST_NAME_PREFIX}'")
        name = name_line[len(REQUEST_NAME_PREFIX):].strip()

        request_line = lines[1].split(None, 1)
        if len(request_line) < 2:
            raise RequestFormatError(f"Invalid URL line format: {lines[1].strip()}")
        method, url = request_line[0], request_line[1].strip()

        headers, body = split_headers_and_body(lines[2:], source, self.report)
        return RequestRecord(name=name, method=method, url=url, headers=headers, body=body or None)
