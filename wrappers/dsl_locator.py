import inspect
import time
from playwright.sync_api import Locator
from utils.code_utils import get_assigned_field_name, to_bool
from utils.web_utils import (get_test_id_selector,
                             highlight_element,
                             reset_element_style)


class DslLocator:
    """
    DslLocator is a wrapper around Playwright's Locator bound to one data-testid:
    - Transparent proxying of locator methods (e.g. .fill(), .click(), .inner_text()).
    - A fresh Playwright Locator is resolved on every call, no element handle is kept.
    - Optional step logging, step delay and element highlight driven by the run config.
    """

    def __init__(self, owner, test_id: str):
        self.page = owner.page
        self.config = owner.config
        self.owner = owner
        self.test_id = str(test_id)
        self.selector = get_test_id_selector(self.test_id)
        self.index = None

        # Detect field name and source file
        self.field_name, self.source_file = self._get_field_info()

    def _get_field_info(self):
        field_info = get_assigned_field_name(self.__class__.__name__)
        if field_info:
            return field_info
        return "unknown_field", inspect.getfile(self.owner.__class__)

    @property
    def locator(self) -> Locator:
        locator = self.page.locator(self.selector)
        if self.index is None:
            return locator
        return locator.nth(self.index)

    def nth(self, index: int) -> "DslLocator":
        """Returns a DslLocator bound to the element at the given position."""
        element = DslLocator.__new__(DslLocator)
        element.__dict__.update(self.__dict__)
        element.index = index
        element.field_name = f"{self.field_name}[{index}]"
        return element

    def all(self) -> list["DslLocator"]:
        """Returns one DslLocator per element currently matching the test id."""
        self._log_step("all")
        return [self.nth(index) for index in range(self.locator.count())]

    def __getattr__(self, item):
        target = getattr(self.locator, item)

        if callable(target):
            def wrapper(*args, **kwargs):
                self._log_step(item)
                element_style = self._highlight_element_with_delay()

                try:
                    return target(*args, **kwargs)
                finally:
                    self._restore_element_style(element_style)
            return wrapper
        return target

    def __str__(self):
        return f"<DslLocator field='{self.field_name}' selector='{self.selector}'>"

    __repr__ = __str__

    def _log_step(self, item: str):
        if to_bool(self.config.get("log_steps")):
            print(f"[STEP] {self.owner.__class__.__name__}.{self.field_name} -> {item}()")

    def _highlight_element_with_delay(self):
        step_delay_milliseconds = self.config.get("step_delay")

        try:
            step_delay_seconds = float(step_delay_milliseconds) / 1000.0
        except (TypeError, ValueError):
            step_delay_seconds = 0.0

        if to_bool(self.config.get("highlight")):
            element_style = highlight_element(self.locator)
            time.sleep(step_delay_seconds)
            return element_style

        elif step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

        return None

    def _restore_element_style(self, element_style):

        # Element can disappear after the action (e.g. closed modal)
        if to_bool(self.config.get("highlight")) and self.locator.count() > 0:
            reset_element_style(self.locator, element_style)
