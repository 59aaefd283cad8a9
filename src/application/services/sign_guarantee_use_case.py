"""
Sign Guarantee Use Case

Responsibility:
    Flow B of the intake bridge: decode the drawn signature, render the
    job-guarantee PDF, attach it to the applicant's task and (optionally)
    tick the "guarantee signed" field.

Architecture Notes:
    - Part of Application Layer (Services)
    - Called by API Layer (guarantee.py router)
    - Rendering through DocumentRendererProtocol, scratch files through
      FileStorageServiceProtocol (workspace removed on every exit path)

Business Rules:
    - Signature accepted as a data URL ("data:image/png;base64,...") or bare base64
    - Blank or non-base64 signature -> InvalidSignatureError (HTTP 400)
    - Base64 that is not an image -> PDF rendered without the image
    - A failed upload is reported inside the result, not raised
    - Field update is best-effort
"""

import asyncio
import base64
import binascii
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel

from src.application.ports.document_renderer import DocumentRendererProtocol
from src.application.ports.file_storage import FileStorageServiceProtocol
from src.application.services.attachment_pipeline import AttachmentPipeline
from src.application.services.task_locator import TaskLocator
from src.domain.applications.value_objects.attachment_result import AttachmentResult
from src.domain.shared.exceptions import InvalidSignatureError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
_DATA_URL_PREFIX = re.compile(r"^data:[^,]*?;base64,", re.IGNORECASE)


def decode_signature_image(signature: Optional[str]) -> bytes:
    """
    Decode a posted signature image.

    Examples:
        >>> decode_signature_image("data:image/png;base64,iVBORw0KGgo=")[:4]
        b'\\x89PNG'

    Raises:
        InvalidSignatureError: blank value or invalid base64
    """
    if not signature or not signature.strip():
        raise InvalidSignatureError("signaturePng is required")

    encoded = _DATA_URL_PREFIX.sub("", signature.strip())
    encoded = re.sub(r"\s+", "", encoded)
    try:
        decoded = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSignatureError(f"signaturePng is not valid base64: {e}") from e

    if not decoded:
        raise InvalidSignatureError("signaturePng is empty")
    return decoded


def build_guarantee_file_name(full_name: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Attachment name: DCA-Job-Guarantee-<sanitized name>-<epoch ms>.pdf

    Examples:
        >>> build_guarantee_file_name("Ada O'Neil", datetime(2025, 1, 1, tzinfo=timezone.utc))
        'DCA-Job-Guarantee-Ada ONeil-1735689600000.pdf'
    """
    safe_name = re.sub(r"[^\w\- ]+", "", (full_name or "").strip()) or "Applicant"
    moment = now or datetime.now(timezone.utc)
    return f"DCA-Job-Guarantee-{safe_name}-{int(moment.timestamp() * 1000)}.pdf"


class GuaranteeSignResult(BaseModel):
    """Result of SignGuaranteeUseCase.execute()."""

    task_id: str
    used_custom: bool
    file_name: str
    attachment: AttachmentResult
    guarantee_field_updated: bool = False


class SignGuaranteeUseCase:
    """
    Render, attach and record a signed job guarantee.

    Process Flow:
        decode_signature_image()
        -> TaskLocator.locate()
        -> FileStorageService.create_workspace()
        -> renderer.render(workdir=workspace)          (worker thread)
        -> AttachmentPipeline.upload(application/pdf)
        -> AttachmentPipeline.record_value(CF_GUARANTEE_SIGNED, True)  (optional)
        -> cleanup_workspace()                                          (always)
    """

    def __init__(
        self,
        locator: TaskLocator,
        pipeline: AttachmentPipeline,
        renderer: DocumentRendererProtocol,
        file_storage: FileStorageServiceProtocol,
        guarantee_field_id: Optional[str] = None,
    ) -> None:
        self.locator = locator
        self.pipeline = pipeline
        self.renderer = renderer
        self.file_storage = file_storage
        self.guarantee_field_id = guarantee_field_id

    async def execute(
        self,
        task_id: Optional[str],
        custom_task_id: Optional[str],
        full_name: Optional[str],
        signed_at: Optional[str],
        terms_text: Optional[str],
        signature_png: Optional[str],
    ) -> GuaranteeSignResult:
        """
        Raises:
            InvalidSignatureError: signature missing or not base64
            TaskNotFoundError: no usable task reference
        """
        signature = decode_signature_image(signature_png)
        target = await self.locator.locate(task_id, custom_task_id)
        file_name = build_guarantee_file_name(full_name)

        workspace = self.file_storage.create_workspace("dtca-guarantee-")
        try:
            pdf_bytes = await asyncio.to_thread(
                self.renderer.render,
                full_name,
                signed_at,
                terms_text,
                signature,
                workdir=workspace,
                file_name=file_name,
            )
            attachment = await self.pipeline.upload(target, pdf_bytes, file_name, PDF_MIME_TYPE)
        finally:
            self.file_storage.cleanup_workspace(workspace)

        field_updated = False
        if self.guarantee_field_id:
            field_updated = await self.pipeline.record_value(
                target, self.guarantee_field_id, True
            )

        logger.info(
            f"Guarantee {file_name} for task {target.task_id}: "
            f"upload={attachment.upload_status.value} field_updated={field_updated}"
        )
        return GuaranteeSignResult(
            task_id=target.task_id,
            used_custom=target.use_custom_id,
            file_name=file_name,
            attachment=attachment,
            guarantee_field_updated=field_updated,
        )
