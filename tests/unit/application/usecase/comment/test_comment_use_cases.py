"""Unit tests for comment use cases."""

import pytest

from remark.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    GetTopLevelCommentsRequest,
    GetTopLevelCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from remark.domain.error import NotFoundError
from remark.domain.model import AttachmentUpload
from remark.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSubmitCommentUseCase:
    """Tests for SubmitCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_confirmation(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitCommentUseCase)
        repo = await unit_env.get(CommentRepository)

        # Act
        response = await use_case.execute(
            SubmitCommentRequest(
                user_name="alice",
                email="alice@example.com",
                text="First!",
                captcha="testCaptcha123",
            )
        )

        # Assert
        assert response.message == "Comment added successfully"
        assert response.model_dump(by_alias=True)["commentId"] == response.comment_id
        saved = await repo.find_by_id(response.comment_id)
        assert saved is not None
        assert saved.text == "First!"


class TestGetTopLevelCommentsUseCase:
    """Tests for GetTopLevelCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_items_use_camel_case_and_attachment_urls(self, unit_env):
        use_case = await unit_env.get(GetTopLevelCommentsUseCase)
        submit = await unit_env.get(SubmitCommentUseCase)
        await submit.execute(
            SubmitCommentRequest(
                user_name="alice",
                email="alice@example.com",
                text="With file",
                captcha="testCaptcha123",
                attachment=AttachmentUpload(
                    filename="notes.txt", content_type="text/plain", content=b"hi"
                ),
            )
        )

        items = await use_case.execute(GetTopLevelCommentsRequest())

        assert len(items) == 1
        data = items[0].model_dump(by_alias=True)
        assert data["userName"] == "alice"
        assert data["parentCommentId"] is None
        assert data["homePage"] is None
        assert data["attachment"].startswith("/uploads/")
        assert data["attachment"].endswith(".txt")


class TestGetCommentThreadUseCase:
    """Tests for GetCommentThreadUseCase."""

    @pytest.mark.asyncio
    async def test_nested_children(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        repo = await unit_env.get(CommentRepository)
        for comment in (
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3, parent_id=2),
        ):
            await repo.save(comment)

        item = await use_case.execute(GetCommentThreadRequest(comment_id=1))

        data = item.model_dump(by_alias=True)
        assert data["id"] == 1
        assert data["children"][0]["id"] == 2
        assert data["children"][0]["parentCommentId"] == 1
        assert data["children"][0]["children"][0]["id"] == 3
        assert data["children"][0]["children"][0]["children"] == []

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentThreadRequest(comment_id=99))
