"""
API Dependencies

FastAPI dependency providers. Long-lived collaborators (settings, tracker
client, option cache, renderer, file storage) are created once by
create_app() and kept on `app.state`; use cases are assembled per request.

Tests replace collaborators by passing them to create_app() or through
`app.dependency_overrides`.
"""

from fastapi import Depends, Request

from src.application.ports.task_tracker import TaskTrackerProtocol
from src.application.services.attachment_pipeline import AttachmentPipeline
from src.application.services.sign_guarantee_use_case import SignGuaranteeUseCase
from src.application.services.submit_application_use_case import SubmitApplicationUseCase
from src.application.services.task_locator import TaskLocator
from src.application.services.update_task_field_use_case import (
    AssignCohortUseCase,
    SetPaymentMethodUseCase,
)
from src.domain.applications.services.option_cache import OptionCache
from src.domain.applications.services.option_resolver import OptionResolver
from src.shared.config import AppSettings


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_tracker(request: Request) -> TaskTrackerProtocol:
    return request.app.state.tracker


def get_option_cache(request: Request) -> OptionCache:
    return request.app.state.option_cache


def get_option_resolver(request: Request) -> OptionResolver:
    return request.app.state.option_resolver


def get_task_locator(
    settings: AppSettings = Depends(get_settings),
    tracker: TaskTrackerProtocol = Depends(get_tracker),
) -> TaskLocator:
    return TaskLocator(tracker, use_custom_task_ids=settings.use_custom_task_ids)


def get_submit_application_use_case(
    settings: AppSettings = Depends(get_settings),
    tracker: TaskTrackerProtocol = Depends(get_tracker),
    cache: OptionCache = Depends(get_option_cache),
    resolver: OptionResolver = Depends(get_option_resolver),
) -> SubmitApplicationUseCase:
    """Use case for POST /api/apply."""
    return SubmitApplicationUseCase(
        tracker=tracker,
        cache=cache,
        resolver=resolver,
        pipeline=AttachmentPipeline(tracker),
        fields=settings.fields,
        list_id=settings.clickup_list_id,
        max_video_bytes=settings.max_video_bytes,
    )


def get_assign_cohort_use_case(
    settings: AppSettings = Depends(get_settings),
    tracker: TaskTrackerProtocol = Depends(get_tracker),
    locator: TaskLocator = Depends(get_task_locator),
) -> AssignCohortUseCase:
    return AssignCohortUseCase(
        tracker=tracker,
        locator=locator,
        cohort_field_id=settings.fields.cohort,
        options=settings.cohort_options,
    )


def get_set_payment_method_use_case(
    settings: AppSettings = Depends(get_settings),
    tracker: TaskTrackerProtocol = Depends(get_tracker),
    locator: TaskLocator = Depends(get_task_locator),
) -> SetPaymentMethodUseCase:
    return SetPaymentMethodUseCase(
        tracker=tracker,
        locator=locator,
        payment_field_id=settings.fields.payment_method,
    )


def get_sign_guarantee_use_case(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    tracker: TaskTrackerProtocol = Depends(get_tracker),
    locator: TaskLocator = Depends(get_task_locator),
) -> SignGuaranteeUseCase:
    """Use case for POST /api/guarantee-sign."""
    return SignGuaranteeUseCase(
        locator=locator,
        pipeline=AttachmentPipeline(tracker),
        renderer=request.app.state.renderer,
        file_storage=request.app.state.file_storage,
        guarantee_field_id=settings.fields.guarantee_signed,
    )
