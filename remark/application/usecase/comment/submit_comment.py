"""Submit comment use case."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from remark.domain.model import AttachmentUpload, CommentSubmission
from remark.domain.service import SubmissionService
from remark.domain.value import CommentId


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    user_name: str
    email: str
    home_page: str | None = None
    text: str
    parent_comment_id: int | None = None
    captcha: str
    attachment: AttachmentUpload | None = None


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    comment_id: int


class SubmitCommentUseCase:
    """Use case for posting a new comment or reply."""

    def __init__(self, submission_service: SubmissionService) -> None:
        """Initialize submit comment use case.

        Args:
            submission_service: Submission domain service
        """
        self.submission_service = submission_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Args:
            request: Raw comment fields and optional attachment

        Returns:
            Confirmation with the new comment ID

        Raises:
            ClientInputError: If the submission is rejected
            AttachmentProcessingError: If the attachment cannot be processed
            StoreError: If the comment cannot be stored
        """
        parent_id = request.parent_comment_id
        comment = await self.submission_service.submit(
            CommentSubmission(
                user_name=request.user_name,
                email=request.email,
                home_page=request.home_page,
                text=request.text,
                parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
                captcha=request.captcha,
                attachment=request.attachment,
            )
        )
        return SubmitCommentResponse(
            message="Comment added successfully", comment_id=comment.id
        )
