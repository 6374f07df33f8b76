"""Render RequestRecords back into request-file text."""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from ..conversion.data_models import AuthContext, RequestRecord
from ..core.errors import ConversionError


def render_request(record: RequestRecord, inherited_auth: Optional[AuthContext] = None) -> str:
    """
    Render one request as a request-file block.

    The request's own auth wins over inherited_auth. A bearer token from
    either one is appended as an ``Authorization`` header after the
    existing headers, without checking for an Authorization header already
    present.
    """
    header_lines: List[str] = [f"{h.key}: {h.value}" for h in record.headers]

    auth = record.auth if record.auth is not None else inherited_auth
    if auth is not None and auth.bearer_token is not None:
        header_lines.append(f"Authorization: Bearer {auth.bearer_token}")

    lines = [f"# {record.name}", f"{record.method} {record.url}", *header_lines]
    return "".join(f"{line}\n" for line in lines) + "\n" + (record.body or "") + "\n"


def write_request_file(
    file_path: Union[str, Path],
    record: RequestRecord,
    inherited_auth: Optional[AuthContext] = None,
) -> Path:
    """
    Write one request to file_path, replacing any existing file.

    Raises:
        ConversionError: If the file cannot be written
    """
    file_path = Path(file_path)
    content = render_request(record, inherited_auth)
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Writing request file {file_path} failed: {e}")
        raise ConversionError(f"Could not write request file: {e}", str(file_path)) from e

    logger.debug(f"Wrote {file_path}")
    return file_path
