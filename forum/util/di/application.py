"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentThreadUseCase,
)
from forum.config import CommentSettings
from forum.domain.service import CommentService, JWTService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
