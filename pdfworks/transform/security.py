"""Password protection helpers."""

from __future__ import annotations

import io
from dataclasses import dataclass

from pypdf import PdfReader
from pypdf.constants import UserAccessPermissions

from ..core.config import DEFAULT_CONFIG, EngineConfig
from ..core.document import clone_document, load_document, serialize
from ..core.exceptions import ParseError, ProtectionError
from ..core.utils import Source, describe_source, get_logger, read_source

LOGGER = get_logger("pdfworks.transform.security")

# Printing, annotating, form filling and accessibility extraction are allowed;
# modifying, copying and assembling are not.
PROTECTED_PERMISSIONS = (
    UserAccessPermissions.PRINT
    | UserAccessPermissions.PRINT_TO_REPRESENTATION
    | UserAccessPermissions.ADD_OR_MODIFY
    | UserAccessPermissions.FILL_FORM_FIELDS
    | UserAccessPermissions.EXTRACT_TEXT_AND_GRAPHICS
)


@dataclass(frozen=True)
class ProtectionSpec:
    user_password: str
    owner_password: str
    permissions: UserAccessPermissions = PROTECTED_PERMISSIONS

    @classmethod
    def for_password(cls, password: str, config: EngineConfig | None = None) -> "ProtectionSpec":
        config = config or DEFAULT_CONFIG
        return cls(user_password=password, owner_password=password + config.owner_password_suffix)


def is_encrypted(source: Source) -> bool:
    """Return ``True`` when ``source`` is an encrypted PDF document."""

    name = describe_source(source)
    try:
        reader = PdfReader(io.BytesIO(read_source(source)))
    except OSError as exc:
        raise ParseError(f"Unable to read PDF: {name}. Error: {exc}", source=name) from exc
    except Exception as exc:  # pypdf exceptions vary
        raise ParseError(f"Unable to parse PDF: {name}. Error: {exc}", source=name) from exc

    return bool(reader.is_encrypted)


def protect_document(
    source: Source,
    password: str,
    *,
    config: EngineConfig | None = None,
) -> bytes:
    """Encrypt ``source`` with ``password`` and the fixed permission policy.

    The owner password is ``password`` followed by the configured suffix.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
        ProtectionError: If the password is empty, the document is already
            encrypted, or encryption fails.
    """

    if not password:
        raise ProtectionError("A non-empty password is required")

    if is_encrypted(source):
        raise ProtectionError("Input PDF is already encrypted")

    reader = load_document(source)

    spec = ProtectionSpec.for_password(password, config)
    writer = clone_document(reader)

    try:
        writer.encrypt(
            user_password=spec.user_password,
            owner_password=spec.owner_password,
            permissions_flag=spec.permissions,
        )
        data = serialize(writer)
    except Exception as exc:  # encryption errors vary
        raise ProtectionError(f"Failed to encrypt PDF: {exc}") from exc

    LOGGER.info("Protected document with %d page(s)", len(writer.pages))
    return data


def unprotect_document(source: Source, password: str) -> bytes:
    """Decrypt ``source`` using ``password`` and return the unencrypted bytes.

    Raises:
        ParseError: If ``source`` cannot be parsed or ``password`` does not
            open it.
        ProtectionError: If the password is empty or the document is not
            encrypted.
    """

    if not password:
        raise ProtectionError("A non-empty password is required")
    if not is_encrypted(source):
        raise ProtectionError("Input PDF is not encrypted")

    reader = load_document(source, password=password)
    writer = clone_document(reader)
    try:
        data = serialize(writer)
    except Exception as exc:  # pypdf errors vary
        raise ProtectionError(f"Failed to write decrypted PDF: {exc}") from exc

    LOGGER.info("Removed protection from document with %d page(s)", len(writer.pages))
    return data


__all__ = [
    "PROTECTED_PERMISSIONS",
    "ProtectionSpec",
    "is_encrypted",
    "protect_document",
    "unprotect_document",
]
