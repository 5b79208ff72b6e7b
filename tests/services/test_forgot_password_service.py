"""Tests for the forgot-password controller."""

import pytest

from app.exceptions import FormClosedError, ValidationError
from app.models.enums import SubmissionStatus
from app.models.forgot_password import ForgotFormScreen, RequestSentScreen
from app.services.auth_api_client import FORGOT_PASSWORD_PATH
from app.services.forgot_password import ForgotPasswordController


@pytest.fixture
def controller(auth_context):
    return ForgotPasswordController(auth_context)


def test_initial_screen_is_empty_form(controller):
    screen = controller.screen
    assert isinstance(screen, ForgotFormScreen)
    assert screen.form.email == ""
    assert screen.error is None


def test_set_email_strips_and_validates(controller):
    errors = controller.set_email("  user@example.com ")
    assert errors == {}
    assert controller.form.email == "user@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, message",
    [("", "Email is required"), ("nope", "Please enter a valid email address")],
)
async def test_invalid_email_blocks_request(controller, auth_api, email, message):
    controller.set_email(email)

    screen = await controller.submit()

    assert isinstance(screen, ForgotFormScreen)
    assert screen.form.validation_errors == {"email": message}
    assert auth_api.calls == []


@pytest.mark.asyncio
async def test_successful_request_shows_sent_screen(controller, auth_api):
    controller.set_email("user@example.com")

    screen = await controller.submit()

    assert screen == RequestSentScreen(email="user@example.com")
    assert auth_api.calls_to(FORGOT_PASSWORD_PATH) == [{"email": "user@example.com"}]


@pytest.mark.asyncio
async def test_failed_request_surfaces_message(controller, auth_api):
    auth_api.respond(FORGOT_PASSWORD_PATH, 429, {"message": "Too many requests"})
    controller.set_email("user@example.com")

    screen = await controller.submit()

    assert isinstance(screen, ForgotFormScreen)
    assert screen.error == "Too many requests"
    assert screen.form.submission_status == SubmissionStatus.FAILED


@pytest.mark.asyncio
async def test_failed_request_without_message_uses_fallback(controller, auth_api):
    auth_api.respond(FORGOT_PASSWORD_PATH, 503, None)
    controller.set_email("user@example.com")

    screen = await controller.submit()

    assert screen.error == "Failed to send reset email"


@pytest.mark.asyncio
async def test_resend_sends_again(controller, auth_api):
    controller.set_email("user@example.com")
    await controller.submit()

    screen = await controller.resend()

    assert isinstance(screen, RequestSentScreen)
    assert len(auth_api.calls_to(FORGOT_PASSWORD_PATH)) == 2


@pytest.mark.asyncio
async def test_failed_resend_stays_on_sent_screen(controller, auth_api):
    controller.set_email("user@example.com")
    await controller.submit()
    auth_api.respond(FORGOT_PASSWORD_PATH, 500, {"message": "Mailer down"})

    screen = await controller.resend()

    assert screen == RequestSentScreen(email="user@example.com", error="Mailer down")


@pytest.mark.asyncio
async def test_resend_without_email_is_noop(controller, auth_api):
    screen = await controller.resend()

    assert isinstance(screen, ForgotFormScreen)
    assert auth_api.calls == []


@pytest.mark.asyncio
async def test_submit_after_sent_is_refused(controller):
    controller.set_email("user@example.com")
    await controller.submit()

    with pytest.raises(FormClosedError):
        await controller.submit()
    with pytest.raises(FormClosedError):
        controller.set_email("other@example.com")


@pytest.mark.asyncio
async def test_from_sent_request_resends_to_given_address(auth_context, auth_api):
    controller = ForgotPasswordController.from_sent_request(
        auth_context, " user@example.com "
    )
    assert controller.screen == RequestSentScreen(email="user@example.com")

    screen = await controller.resend()

    assert screen == RequestSentScreen(email="user@example.com")
    assert auth_api.calls_to(FORGOT_PASSWORD_PATH) == [{"email": "user@example.com"}]


@pytest.mark.parametrize(
    "email, message",
    [("", "Email is required"), ("nope", "Please enter a valid email address")],
)
def test_from_sent_request_rejects_bad_address(auth_context, email, message):
    with pytest.raises(ValidationError) as exc_info:
        ForgotPasswordController.from_sent_request(auth_context, email)

    assert str(exc_info.value) == message
    assert exc_info.value.field == "email"
