"""Read multipart uploads into memory under the configured limits."""

from collections.abc import Sequence

from fastapi import UploadFile

from rfp_assistant.errors import UploadRejectedError
from rfp_assistant.models.documents import UploadedDocument


def _megabytes(size: int) -> str:
    return f"{size / (1024 * 1024):g} MB"


async def read_upload(upload: UploadFile, max_bytes: int) -> UploadedDocument:
    """Read one upload, reading at most one byte past ``max_bytes``.

    Raises:
        UploadRejectedError: If the file is too large.
    """
    name = upload.filename or "upload"
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise UploadRejectedError(
            f"File {name} exceeds the {_megabytes(max_bytes)} upload limit.",
            too_large=True,
        )

    return UploadedDocument(original_name=name, content=content)


async def read_uploads(
    uploads: Sequence[UploadFile] | None,
    max_files: int,
    max_bytes: int,
) -> list[UploadedDocument]:
    """Read a batch of uploads in upload order.

    Args:
        uploads: Files from the request, or None when the field was absent.
        max_files: Largest accepted batch.
        max_bytes: Largest accepted file.

    Returns:
        The uploaded documents. Empty when nothing was uploaded.

    Raises:
        UploadRejectedError: If the batch or any file is too large.
    """
    uploads = list(uploads or [])
    if len(uploads) > max_files:
        raise UploadRejectedError(
            f"Too many files. At most {max_files} files can be uploaded at once."
        )

    return [await read_upload(upload, max_bytes) for upload in uploads]
