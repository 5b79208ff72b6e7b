"""Tests for the form schemas and logging helpers."""

import pytest

from app.models.password_reset import FormFields
from app.utils.validation import (
    mask_email,
    mask_token,
    validate_forgot_form,
    validate_reset_form,
)

LENGTH_MESSAGE = "Password must be at least 8 characters"
PATTERN_MESSAGE = (
    "Password must contain lowercase, uppercase, number, and special character"
)


class TestValidateResetForm:
    """Test the reset-password form rules."""

    def test_valid_form_has_no_errors(self):
        fields = FormFields(password="Valid1Pass!", confirm_password="Valid1Pass!")
        assert validate_reset_form(fields) == {}

    def test_short_password_fails_length_rule(self):
        fields = FormFields(password="short1", confirm_password="short1")
        errors = validate_reset_form(fields)
        assert errors["password"] == LENGTH_MESSAGE

    def test_missing_uppercase_fails_pattern_rule(self):
        fields = FormFields(password="alllowercase1!", confirm_password="alllowercase1!")
        errors = validate_reset_form(fields)
        assert errors["password"] == PATTERN_MESSAGE

    @pytest.mark.parametrize("password", ["NoDigits!!", "NoSpecial11", "NOLOWER1!"])
    def test_each_character_class_is_required(self, password):
        fields = FormFields(password=password, confirm_password=password)
        assert validate_reset_form(fields) == {"password": PATTERN_MESSAGE}

    def test_mismatch_attaches_to_confirmation_only(self):
        fields = FormFields(password="Valid1Pass!", confirm_password="Other1Pass!")
        errors = validate_reset_form(fields)
        assert errors == {"confirm_password": "Passwords don't match"}

    def test_empty_confirmation_is_required(self):
        fields = FormFields(password="Valid1Pass!", confirm_password="")
        errors = validate_reset_form(fields)
        assert errors == {"confirm_password": "Please confirm your password"}

    def test_empty_form_reports_both_fields(self):
        errors = validate_reset_form(FormFields())
        assert errors == {
            "password": LENGTH_MESSAGE,
            "confirm_password": "Please confirm your password",
        }

    def test_mismatch_reported_alongside_password_rule(self):
        """A short password and a differing confirmation both get a message."""
        fields = FormFields(password="short1", confirm_password="short2")
        errors = validate_reset_form(fields)
        assert errors == {
            "password": LENGTH_MESSAGE,
            "confirm_password": "Passwords don't match",
        }

    def test_mismatch_reported_alongside_pattern_rule(self):
        fields = FormFields(password="alllowercase1!", confirm_password="other")
        errors = validate_reset_form(fields)
        assert errors == {
            "password": PATTERN_MESSAGE,
            "confirm_password": "Passwords don't match",
        }

    def test_emoji_password_counts_utf16_length(self):
        """Four astral characters reach the minimum length, leaving the pattern rule."""
        password = "\U0001F600" * 4
        fields = FormFields(password=password, confirm_password=password)
        assert validate_reset_form(fields) == {"password": PATTERN_MESSAGE}


class TestValidateForgotForm:
    """Test the reset-link request form rules."""

    def test_valid_email(self):
        assert validate_forgot_form("user@example.com") == {}

    def test_empty_email(self):
        assert validate_forgot_form("") == {"email": "Email is required"}

    def test_malformed_email(self):
        assert validate_forgot_form("not-an-email") == {
            "email": "Please enter a valid email address"
        }


class TestMasking:
    """Test the helpers that keep secrets out of logs."""

    def test_mask_email(self):
        assert mask_email("user@example.com") == "u***r@example.com"

    def test_mask_short_email(self):
        assert mask_email("ab@example.com") == "a***@example.com"

    def test_mask_invalid_email(self):
        assert mask_email("not-an-email") == "***@***.***"

    def test_mask_token(self):
        assert mask_token("abcdef123456") == "abcd***"

    def test_mask_short_token(self):
        assert mask_token("abc") == "***"

    def test_mask_missing_token(self):
        assert mask_token(None) == "<none>"
