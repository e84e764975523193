"""Comment submission domain service."""

import secrets
from pathlib import PurePath

import logfire

from remark.config import SubmissionSettings
from remark.domain.error import (
    AttachmentTooLargeError,
    EmptyContentError,
    GateFailureError,
    ParentNotFoundError,
    UnsupportedAttachmentError,
)
from remark.domain.model import AttachmentUpload, Comment, CommentSubmission, NewComment
from remark.domain.repository import AttachmentStorage, CommentRepository

from .sanitizer import ContentSanitizer


class ImageNormalizer:
    """Image re-encoding interface."""

    async def fit_within(
        self, content: bytes, content_type: str, max_width: int, max_height: int
    ) -> bytes:
        """Shrink an image so that it fits inside a bounding box.

        Aspect ratio is preserved and images are never enlarged or cropped.

        Args:
            content: Encoded image bytes
            content_type: Declared image MIME type
            max_width: Maximum width in pixels
            max_height: Maximum height in pixels

        Returns:
            Re-encoded image bytes in the same format

        Raises:
            AttachmentProcessingError: If the image cannot be decoded or encoded
        """
        raise NotImplementedError


class SubmissionService:
    """Turns untrusted submissions into stored comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        attachment_storage: AttachmentStorage,
        image_normalizer: ImageNormalizer,
        sanitizer: ContentSanitizer,
        settings: SubmissionSettings,
    ) -> None:
        """Initialize submission service.

        Args:
            comment_repository: Comment repository
            attachment_storage: Storage for attached files
            image_normalizer: Resizer for image attachments
            sanitizer: Markup sanitizer
            settings: Submission rules (gate token, limits, allow-lists)
        """
        self.comment_repository = comment_repository
        self.attachment_storage = attachment_storage
        self.image_normalizer = image_normalizer
        self.sanitizer = sanitizer
        self.settings = settings

    async def submit(self, submission: CommentSubmission) -> Comment:
        """Validate, sanitize and store a comment.

        Steps:
        1. Gate check on the verification token
        2. Attachment type and size check
        3. Parent existence check for replies
        4. Sanitize text and plain fields
        5. Normalize and store the attachment
        6. Insert the record, removing the stored file if the insert fails

        Args:
            submission: Raw submission

        Returns:
            Stored comment

        Raises:
            GateFailureError: If the token does not match
            UnsupportedAttachmentError: If the attachment type is not accepted
            AttachmentTooLargeError: If the attachment exceeds the size ceiling
            ParentNotFoundError: If the parent comment does not exist
            EmptyContentError: If a required field is empty once sanitized
            AttachmentProcessingError: If the image cannot be normalized
            StoreError: If the store fails
        """
        with logfire.span(
            "submission_service.submit",
            parent_comment_id=submission.parent_comment_id,
            has_attachment=submission.attachment is not None,
        ):
            self.check_gate(submission.captcha)

            if submission.attachment is not None:
                self.validate_attachment(submission.attachment)

            if submission.parent_comment_id is not None:
                parent = await self.comment_repository.find_by_id(
                    submission.parent_comment_id
                )
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=submission.parent_comment_id,
                    )
                    raise ParentNotFoundError(submission.parent_comment_id)

            text = self.sanitizer.sanitize_text(submission.text)
            if not text:
                raise EmptyContentError("text")
            user_name = self.sanitizer.sanitize_plain(submission.user_name)
            if not user_name:
                raise EmptyContentError("userName")
            email = self.sanitizer.sanitize_plain(submission.email)
            if not email:
                raise EmptyContentError("email")
            home_page = self.sanitizer.sanitize_plain(submission.home_page)

            filename = None
            if submission.attachment is not None:
                filename = await self.store_attachment(submission.attachment)

            new_comment = NewComment(
                user_name=user_name,
                email=email,
                home_page=home_page,
                text=text,
                parent_comment_id=submission.parent_comment_id,
                attachment=filename,
            )

            try:
                saved = await self.comment_repository.add(new_comment)
            except BaseException:  # includes cancellation
                if filename is not None:
                    logfire.warn("Removing orphaned attachment", filename=filename)
                    await self.attachment_storage.delete(filename)
                raise

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                parent_comment_id=saved.parent_comment_id,
                attachment=filename,
            )
            return saved

    def check_gate(self, token: str) -> None:
        """Compare the verification token with the expected value.

        Raises:
            GateFailureError: On any mismatch
        """
        expected = self.settings.captcha_code.encode()
        if not secrets.compare_digest(token.encode(), expected):
            logfire.warn("Gate check failed")
            raise GateFailureError()

    def validate_attachment(self, attachment: AttachmentUpload) -> None:
        """Check attachment type and size.

        Raises:
            UnsupportedAttachmentError: If the type is not accepted
            AttachmentTooLargeError: If the file exceeds the size ceiling
        """
        if attachment.content_type not in self.settings.allowed_content_types:
            logfire.warn(
                "Unsupported attachment rejected",
                content_type=attachment.content_type,
            )
            raise UnsupportedAttachmentError(attachment.content_type)

        if attachment.size > self.settings.max_attachment_bytes:
            logfire.warn(
                "Oversized attachment rejected",
                size=attachment.size,
                limit=self.settings.max_attachment_bytes,
            )
            raise AttachmentTooLargeError(
                attachment.size, self.settings.max_attachment_bytes
            )

    async def store_attachment(self, attachment: AttachmentUpload) -> str:
        """Normalize an attachment and write it to storage.

        Images are shrunk to the configured bounds before anything is
        written. Text files are stored byte-for-byte.

        Returns:
            Generated filename
        """
        content = attachment.content
        if attachment.content_type in self.settings.image_content_types:
            content = await self.image_normalizer.fit_within(
                content,
                attachment.content_type,
                self.settings.max_image_width,
                self.settings.max_image_height,
            )

        extension = PurePath(attachment.filename).suffix.lower()
        filename = await self.attachment_storage.save(content, extension)
        logfire.info(
            "Attachment stored",
            filename=filename,
            content_type=attachment.content_type,
            size=len(content),
        )
        return filename
