"""Request validation rules.

Rules are evaluated in order and independently; every failing rule is
reported rather than stopping at the first.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from pydantic import AnyUrl, TypeAdapter, ValidationError

from urlshortener.services.exceptions import URLValidationError


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationRule:
    """A predicate over one field plus the failure it reports.

    ``when`` guards the rule: if it returns False the rule is skipped.
    """
    field: str
    code: str
    message: str
    predicate: Callable[[Any], bool]
    when: Optional[Callable[[Any], bool]] = None

    def check(self, value: Any) -> Optional[ValidationFailure]:
        if self.when is not None and not self.when(value):
            return None
        if self.predicate(value):
            return None
        return ValidationFailure(self.field, self.code, self.message)


def collect_failures(rules: Sequence[ValidationRule], values: dict) -> List[ValidationFailure]:
    """Run every rule against its field and return all failures in rule order."""
    failures = []
    for rule in rules:
        failure = rule.check(values.get(rule.field))
        if failure is not None:
            failures.append(failure)
    return failures


def is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_non_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_absolute_url(value: Any) -> bool:
    """True when ``value`` parses as a URL with a scheme and a host."""
    if not isinstance(value, str):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(url.host)


SHORTEN_RULES = (
    ValidationRule("url", "required", "Url is required.", is_present),
    ValidationRule("url", "invalid_format", "Url is not valid.", is_absolute_url, when=is_non_empty),
)


def validate_shorten_request(url: Optional[str]) -> None:
    """
    Validate the input of a shorten request.

    Raises:
        URLValidationError: Carrying every failed rule
    """
    failures = collect_failures(SHORTEN_RULES, {"url": url})
    if failures:
        raise URLValidationError(failures)
