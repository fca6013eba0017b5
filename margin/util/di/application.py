"""Application layer DI providers."""

from dishka import Scope, provide

from margin.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from margin.application.usecase.user import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUserUseCase,
    SetUserTypeUseCase,
    VerifyUserUseCase,
)
from margin.config import AuthSettings, CommentSettings
from margin.domain.repository import UnitOfWork
from margin.domain.service import (
    CommentCache,
    CommentService,
    IdentityService,
    JWTService,
    ModerationService,
    NotificationService,
    RateLimiter,
    RenderService,
    UserService,
)
from margin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        comment_cache: CommentCache,
        settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            render_service=render_service,
            user_service=user_service,
            comment_cache=comment_cache,
            settings=settings,
        )

    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide administrator comment listing use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            render_service=render_service,
            user_service=user_service,
            settings=settings,
        )

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        moderation_service: ModerationService,
        notification_service: NotificationService,
        render_service: RenderService,
        user_service: UserService,
        rate_limiter: RateLimiter,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
        comment_settings: CommentSettings,
        auth_settings: AuthSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            moderation_service=moderation_service,
            notification_service=notification_service,
            render_service=render_service,
            user_service=user_service,
            rate_limiter=rate_limiter,
            comment_cache=comment_cache,
            unit_of_work=unit_of_work,
            comment_settings=comment_settings,
            auth_settings=auth_settings,
        )

    @provide
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            render_service=render_service,
            user_service=user_service,
            comment_cache=comment_cache,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            identity_service=identity_service,
            comment_cache=comment_cache,
            unit_of_work=unit_of_work,
        )

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService, notification_service: NotificationService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service, notification_service=notification_service
        )

    @provide
    def get_verify_user_use_case(self, user_service: UserService) -> VerifyUserUseCase:
        """Provide verify user use case."""
        return VerifyUserUseCase(user_service=user_service)

    @provide
    def get_login_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        render_service: RenderService,
        auth_settings: AuthSettings,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            render_service=render_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_current_user_use_case(
        self, identity_service: IdentityService, render_service: RenderService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            identity_service=identity_service, render_service=render_service
        )

    @provide
    def get_set_user_type_use_case(
        self, identity_service: IdentityService, user_service: UserService
    ) -> SetUserTypeUseCase:
        """Provide set user type use case."""
        return SetUserTypeUseCase(
            identity_service=identity_service, user_service=user_service
        )
