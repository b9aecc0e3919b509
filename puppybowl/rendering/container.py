import re
from html import escape
from typing import Any, Awaitable, Callable, Dict, List

from loguru import logger

SubmitHandler = Callable[["FormSubmission"], Awaitable[None]]

_CONTROL_PATTERN = r'<button class="{css_class}" data-player-id="([^"]*)"'


class FormSubmission:
    """A submitted form: its field values and whether default handling is off."""

    def __init__(self, form_id: str, fields: Dict[str, str]):
        self.form_id = form_id
        self.fields = fields
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def value(self, name: str) -> str:
        return self.fields.get(name, "")


class Container:
    """The page region every render call fully replaces.

    Handlers registered with ``on_submit`` belong to the content they were
    registered for and are dropped by the next ``replace``.
    """

    def __init__(self, selector: str = "main"):
        self.selector = selector
        self.html = ""
        self._submit_handlers: Dict[str, SubmitHandler] = {}

    def replace(self, html: str) -> None:
        self.html = html
        self._submit_handlers.clear()

    def on_submit(self, form_id: str, handler: SubmitHandler) -> None:
        if f'id="{form_id}"' not in self.html:
            raise ValueError(f"No form #{form_id} in current content")
        self._submit_handlers[form_id] = handler

    def has_form(self, form_id: str) -> bool:
        return form_id in self._submit_handlers

    async def submit(self, form_id: str, **fields: Any) -> FormSubmission:
        """Submits form ``form_id`` with the given field values."""
        handler = self._submit_handlers.get(form_id)
        if handler is None:
            raise LookupError(f"No submit handler bound for form #{form_id}")
        submission = FormSubmission(
            form_id, {name: str(value) for name, value in fields.items()}
        )
        logger.debug(f"Submitting form #{form_id} with fields {list(submission.fields)}")
        await handler(submission)
        return submission

    def control_ids(self, css_class: str) -> List[str]:
        """Player ids carried by the rendered buttons of the given class."""
        pattern = _CONTROL_PATTERN.format(css_class=re.escape(css_class))
        return re.findall(pattern, self.html)


def render_document(container: Container, title: str = "Puppy Bowl") -> str:
    """Wraps the container content in a minimal standalone page."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"<head><meta charset=\"utf-8\"><title>{escape(title)}</title></head>\n"
        "<body>\n"
        f"<{container.selector}>{container.html}</{container.selector}>\n"
        "</body>\n"
        "</html>\n"
    )
