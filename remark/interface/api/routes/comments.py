"""Comment routes."""

import json

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from starlette.datastructures import UploadFile

from remark.application.usecase.comment import (
    CommentItem,
    CommentThreadItem,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    GetTopLevelCommentsRequest,
    GetTopLevelCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from remark.config import SubmissionSettings
from remark.domain.model import AttachmentUpload
from remark.interface.error import MalformedRequestError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment.

    Fields are kept lenient here; emptiness and markup are dealt with by the
    submission service after the gate check.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_name: str = ""
    email: str = ""
    home_page: str | None = None
    text: str = ""
    parent_comment_id: int | None = None
    captcha: str = ""

    @field_validator("parent_comment_id", mode="before")
    @classmethod
    def blank_parent_is_none(cls, v):
        """Form posts send an empty string for top-level comments."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


async def read_upload(upload: UploadFile, max_bytes: int) -> AttachmentUpload | None:
    """Read an uploaded file, keeping at most one byte past the size ceiling.

    The extra byte is enough for the submission service to reject the file as
    too large without the whole upload being held in memory.

    Returns:
        The attachment, or None if the file field was left empty
    """
    content = await upload.read(max_bytes + 1)
    if not upload.filename and not content:
        return None
    return AttachmentUpload(
        filename=upload.filename or "",
        content_type=upload.content_type,
        content=content,
    )


async def read_submission(request: Request, max_bytes: int) -> SubmitCommentRequest:
    """Read a submission from a JSON body or a (multipart) form.

    Args:
        request: Incoming request
        max_bytes: Attachment size ceiling

    Returns:
        Use case request with the optional attachment loaded into memory

    Raises:
        MalformedRequestError: If the body cannot be parsed
    """
    content_type = request.headers.get("content-type", "")
    attachment = None

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        fields = {key: value for key, value in form.items() if isinstance(value, str)}
        upload = form.get("file")
        if isinstance(upload, UploadFile):
            attachment = await read_upload(upload, max_bytes)
    else:
        try:
            fields = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise MalformedRequestError("Request body is not valid JSON") from None
        if not isinstance(fields, dict):
            raise MalformedRequestError("Request body must be a JSON object")

    try:
        body = SubmitCommentAPIRequest.model_validate(fields)
    except ValidationError as e:
        fields_in_error = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise MalformedRequestError(f"Invalid fields: {fields_in_error}") from None

    return SubmitCommentRequest(
        user_name=body.user_name,
        email=body.email,
        home_page=body.home_page,
        text=body.text,
        parent_comment_id=body.parent_comment_id,
        captcha=body.captcha,
        attachment=attachment,
    )


@router.post("/comments", response_model=SubmitCommentResponse)
async def submit_comment(
    request: Request,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    submission_settings: FromDishka[SubmissionSettings],
) -> SubmitCommentResponse:
    """Post a comment or a reply, optionally with one attached file.

    Accepts JSON or multipart form data with fields userName, email,
    homePage, text, parentCommentId, captcha and an optional ``file``.

    Returns:
        Confirmation with the new comment ID
    """
    use_case_request = await read_submission(
        request, submission_settings.max_attachment_bytes
    )
    response = await submit_comment_use_case.execute(use_case_request)
    logfire.info("Comment submitted", comment_id=response.comment_id)
    return response


@router.get("/top-level-comments", response_model=list[CommentItem])
async def get_top_level_comments(
    get_top_level_comments_use_case: FromDishka[GetTopLevelCommentsUseCase],
    sort_by: str = Query(default="date", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
) -> list[CommentItem]:
    """List comments that are not replies.

    Args:
        get_top_level_comments_use_case: Use case from DI
        sort_by: userName, email or date
        sort_order: asc or desc

    Returns:
        Top-level comments without children
    """
    return await get_top_level_comments_use_case.execute(
        GetTopLevelCommentsRequest(sort_by=sort_by, sort_order=sort_order)
    )


@router.get("/comments/{comment_id}", response_model=CommentThreadItem)
async def get_comment_thread(
    comment_id: int,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
) -> CommentThreadItem:
    """Get a comment with its full reply tree.

    Args:
        comment_id: Root comment ID
        get_comment_thread_use_case: Use case from DI

    Returns:
        The comment with nested children
    """
    return await get_comment_thread_use_case.execute(
        GetCommentThreadRequest(comment_id=comment_id)
    )
