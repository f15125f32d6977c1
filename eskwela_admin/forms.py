"""
Form state and field validation for clients of the admin API.

``FormState`` tracks values, per-field errors, touched flags and the
submitting flag. ``handle_submit`` runs a caller's submit coroutine; when it
raises, server-side field errors attached to the exception are merged into
the form before the exception propagates.
"""
import copy
import inspect
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

import httpx

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class FieldRules:
    """Validation rules for one field; ``message`` overrides required/pattern errors."""
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Union[str, re.Pattern]] = None
    email: bool = False
    numeric: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    custom: Optional[Callable[[Any], Optional[str]]] = None
    message: Optional[str] = None


# Common rule sets
REQUIRED = FieldRules(required=True)
EMAIL = FieldRules(required=True, email=True)
PASSWORD = FieldRules(required=True, min_length=8)
NUMERIC = FieldRules(numeric=True)
POSITIVE_NUMBER = FieldRules(numeric=True, min=0)
PERCENTAGE = FieldRules(numeric=True, min=0, max=100)
URL = FieldRules(
    pattern=r"^https?://.+",
    message="Must be a valid URL starting with http:// or https://",
)
PHONE = FieldRules(pattern=r"^\+?[\d\s\-\(\)]+$", message="Must be a valid phone number")


def confirm_password(password: str) -> FieldRules:
    return FieldRules(
        required=True,
        custom=lambda value: "Passwords do not match" if value != password else None,
    )


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() == ""
    return not value


def check_field(name: str, value: Any, rules: FieldRules) -> Optional[str]:
    """Return the first failing rule's message, or None."""
    if _is_blank(value):
        if rules.required:
            return rules.message or f"{name} is required"
        return None

    if isinstance(value, str):
        if rules.min_length and len(value) < rules.min_length:
            return f"{name} must be at least {rules.min_length} characters"
        if rules.max_length and len(value) > rules.max_length:
            return f"{name} must not exceed {rules.max_length} characters"
        if rules.email and not EMAIL_PATTERN.match(value):
            return f"{name} must be a valid email address"
        if rules.pattern and not re.search(rules.pattern, value):
            return rules.message or f"{name} format is invalid"

    if rules.numeric:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return f"{name} must be a number"
        if rules.min is not None and number < rules.min:
            return f"{name} must be at least {rules.min:g}"
        if rules.max is not None and number > rules.max:
            return f"{name} must not exceed {rules.max:g}"

    if rules.custom:
        return rules.custom(value) or None
    return None


def server_errors(exc: BaseException) -> Optional[Mapping[str, Any]]:
    """Field errors carried by a failed submission, if any."""
    errors = getattr(exc, "errors", None)
    if isinstance(errors, Mapping):
        return errors
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("errors"), Mapping):
            return body["errors"]
    return None


@dataclass
class FormState:
    initial: Dict[str, Any]
    rules: Dict[str, FieldRules] = field(default_factory=dict)
    data: Dict[str, Any] = field(init=False)
    errors: Dict[str, str] = field(default_factory=dict, init=False)
    touched: Dict[str, bool] = field(default_factory=dict, init=False)
    is_submitting: bool = field(default=False, init=False)

    def __post_init__(self):
        self.data = copy.deepcopy(self.initial)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_dirty(self) -> bool:
        return any(self.data.get(key) != value for key, value in self.initial.items()) or any(
            key not in self.initial for key in self.data
        )

    def validate_field(self, name: str) -> Optional[str]:
        """Validate one field, record the result and mark it touched."""
        self.touched[name] = True
        rules = self.rules.get(name)
        error = check_field(name, self.data.get(name), rules) if rules else None
        if error:
            self.errors[name] = error
        else:
            self.errors.pop(name, None)
        return error

    def validate_form(self) -> bool:
        self.errors = {}
        for name, rules in self.rules.items():
            error = check_field(name, self.data.get(name), rules)
            if error:
                self.errors[name] = error
        return not self.errors

    def touch_all(self) -> None:
        for name in self.rules:
            self.touched[name] = True

    def set_errors(self, errors: Mapping[str, Union[str, List[str]]]) -> None:
        for name, message in errors.items():
            if isinstance(message, (list, tuple)):
                if not message:
                    continue
                message = message[0]
            self.errors[name] = str(message)

    def clear_errors(self) -> None:
        self.errors = {}
        self.touched = {}

    def reset(self) -> None:
        self.data = copy.deepcopy(self.initial)
        self.clear_errors()

    async def handle_submit(
        self,
        submit_fn: Callable[[Dict[str, Any]], Awaitable[Any]],
        validate_on_submit: bool = True,
    ) -> bool:
        if validate_on_submit:
            self.touch_all()
            if not self.validate_form():
                logger.debug(f"Form submission blocked: {sorted(self.errors)}")
                return False

        self.is_submitting = True
        try:
            result = submit_fn(dict(self.data))
            if inspect.isawaitable(result):
                await result
            return True
        except Exception as exc:
            errors = server_errors(exc)
            if errors:
                self.set_errors(errors)
            raise
        finally:
            self.is_submitting = False
