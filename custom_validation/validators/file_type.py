"""
custom_validation/validators/file_type.py

File-type rule for uploaded files.

An upload passes when it is absent, or when it is non-empty and its declared
content type belongs to one of the configured FileType categories. The
category → MIME mapping is the static table below; comparison is
case-insensitive.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from starlette.datastructures import UploadFile as StarletteUploadFile

from custom_validation.core.constants import (
    EMPTY_FILE_MESSAGE,
    FILE_TYPE_MESSAGE,
    FILE_TYPES_MESSAGE,
)
from custom_validation.core.exceptions import ConfigurationError, UnknownFileTypeError
from custom_validation.core.logger import get_logger
from custom_validation.validators.base import (
    ValidationErrorCode,
    ValidationResult,
    ValidationRule,
)

logger = get_logger(__name__)


# ── File-type categories ───────────────────────────────────────────────────────

class FileType(enum.Enum):
    """Logical file-type categories a rule can be configured with."""

    JPG = "JPG"
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    TIFF = "TIFF"
    WEBP = "WEBP"
    SVG = "SVG"
    ICO = "ICO"
    PDF = "PDF"
    DOC = "DOC"
    DOCX = "DOCX"
    XLS = "XLS"
    XLSX = "XLSX"
    PPT = "PPT"
    PPTX = "PPTX"
    ODT = "ODT"
    ODS = "ODS"
    RTF = "RTF"
    TXT = "TXT"
    CSV = "CSV"
    HTML = "HTML"
    XML = "XML"
    JSON = "JSON"
    ZIP = "ZIP"
    RAR = "RAR"
    SEVEN_ZIP = "7Z"
    MP3 = "MP3"
    WAV = "WAV"
    MP4 = "MP4"
    AVI = "AVI"
    MOV = "MOV"

    @classmethod
    def parse(cls, names: Union[str, Iterable[str]]) -> Tuple["FileType", ...]:
        """
        Resolve file-type names (case-insensitive) to members, keeping order.

        Accepts a comma-separated string ("pdf, png") or an iterable of names.
        Blank entries are ignored.

        Raises:
            UnknownFileTypeError: If a name matches no member.
        """
        if isinstance(names, str):
            names = names.split(",")

        parsed: List[FileType] = []
        for raw in names:
            name = raw.strip().upper()
            if not name:
                continue
            try:
                parsed.append(cls(name))
            except ValueError:
                raise UnknownFileTypeError(f"Unknown file type: '{raw.strip()}'.") from None
        return tuple(parsed)


#: FileType → canonical MIME strings. Equivalent strings are comma-separated.
MIME_TYPES: Dict[FileType, str] = {
    FileType.JPG: "image/jpg,image/jpeg,image/pjpeg",
    FileType.JPEG: "image/jpeg,image/jpg,image/pjpeg",
    FileType.PNG: "image/png,image/x-png",
    FileType.GIF: "image/gif",
    FileType.BMP: "image/bmp,image/x-ms-bmp",
    FileType.TIFF: "image/tiff",
    FileType.WEBP: "image/webp",
    FileType.SVG: "image/svg+xml",
    FileType.ICO: "image/x-icon,image/vnd.microsoft.icon",
    FileType.PDF: "application/pdf",
    FileType.DOC: "application/msword",
    FileType.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    FileType.XLS: "application/vnd.ms-excel",
    FileType.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    FileType.PPT: "application/vnd.ms-powerpoint",
    FileType.PPTX: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    FileType.ODT: "application/vnd.oasis.opendocument.text",
    FileType.ODS: "application/vnd.oasis.opendocument.spreadsheet",
    FileType.RTF: "application/rtf,text/rtf",
    FileType.TXT: "text/plain",
    FileType.CSV: "text/csv,application/csv",
    FileType.HTML: "text/html",
    FileType.XML: "application/xml,text/xml",
    FileType.JSON: "application/json",
    FileType.ZIP: "application/zip,application/x-zip-compressed",
    FileType.RAR: "application/vnd.rar,application/x-rar-compressed",
    FileType.SEVEN_ZIP: "application/x-7z-compressed",
    FileType.MP3: "audio/mpeg,audio/mp3",
    FileType.WAV: "audio/wav,audio/x-wav",
    FileType.MP4: "video/mp4",
    FileType.AVI: "video/x-msvideo",
    FileType.MOV: "video/quicktime",
}


def mime_types_for(file_types: Iterable[FileType]) -> FrozenSet[str]:
    """Expand categories to their upper-cased MIME strings."""
    return frozenset(
        mime.strip().upper()
        for file_type in file_types
        for mime in MIME_TYPES[file_type].split(",")
    )


# ── Uploaded file ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class UploadedFile:
    """
    The two facts the rule needs about an upload.

    Attributes:
        length       : Size in bytes.
        content_type : Declared MIME type (e.g. "application/pdf").
        filename     : Original filename, for logging only.
    """

    length: int
    content_type: str
    filename: Optional[str] = None

    @classmethod
    def from_upload(cls, upload: StarletteUploadFile) -> "UploadedFile":
        """
        Adapt a FastAPI / Starlette ``UploadFile``.

        When the multipart parser did not record a size, the spooled file is
        measured and rewound.
        """
        size = upload.size
        if size is None:
            upload.file.seek(0, os.SEEK_END)
            size = upload.file.tell()
            upload.file.seek(0)
        return cls(
            length=size,
            content_type=upload.content_type or "",
            filename=upload.filename,
        )


# ── Rule ───────────────────────────────────────────────────────────────────────

class FileTypeValidator(ValidationRule):
    """
    Checks that an upload is non-empty and of an allowed file type.

    Configure with a single FileType for the singular message
    ("… should be in PDF format.") or with a sequence for the plural one
    ("… should be in PDF,PNG formats."). An empty sequence disables the
    type check; the empty-file check still applies.
    """

    accepted_types = (UploadedFile, StarletteUploadFile)
    uses_display_name = True

    def __init__(
        self,
        file_types: Union[FileType, Iterable[FileType], None],
        error_message: Optional[str] = None,
    ) -> None:
        """
        Args:
            file_types    : One FileType, or a sequence of them.
            error_message : Template overriding the default message.
                            ``{0}`` is the field name, ``{1}`` the
                            comma-joined type names.

        Raises:
            ConfigurationError: If ``file_types`` is a string or holds
                                anything other than FileType members.
        """
        if isinstance(file_types, str):
            raise ConfigurationError(
                f"File types must be FileType members, got the string {file_types!r}. "
                "Use FileType.parse() to resolve names."
            )

        if isinstance(file_types, FileType):
            self.file_types: Tuple[FileType, ...] = (file_types,)
            default_message = FILE_TYPE_MESSAGE
        else:
            self.file_types = tuple(file_types or ())
            default_message = FILE_TYPES_MESSAGE

        invalid = [t for t in self.file_types if not isinstance(t, FileType)]
        if invalid:
            raise ConfigurationError(f"Not FileType members: {invalid!r}.")

        self.error_message: str = error_message or default_message
        self._mime_types = mime_types_for(self.file_types)

    def validate_value(
        self,
        value: Union[UploadedFile, StarletteUploadFile, None],
        field_name: str,
    ) -> ValidationResult:
        if value is None:
            return ValidationResult.success()

        upload = UploadedFile.from_upload(value) if isinstance(value, StarletteUploadFile) else value

        if upload.length <= 0:
            logger.debug("'%s' — empty upload '%s' rejected.", field_name, upload.filename)
            return ValidationResult.failure(ValidationErrorCode.EMPTY_FILE, EMPTY_FILE_MESSAGE)

        if not self.file_types:
            return ValidationResult.success()

        if (upload.content_type or "").upper() in self._mime_types:
            return ValidationResult.success()

        names = ",".join(file_type.name for file_type in self.file_types)
        logger.debug(
            "'%s' — content type '%s' not in %s.", field_name, upload.content_type, names
        )
        return ValidationResult.failure(
            ValidationErrorCode.UNSUPPORTED_FILE_TYPE,
            self.error_message.format(field_name, names),
        )


def validate_file_type(
    file: Union[UploadedFile, StarletteUploadFile, None],
    allowed: Union[FileType, Iterable[FileType], None],
    field_display_name: str,
    error_message: Optional[str] = None,
) -> ValidationResult:
    """Functional form of :class:`FileTypeValidator`."""
    return FileTypeValidator(allowed, error_message=error_message).validate_value(
        file, field_display_name
    )
