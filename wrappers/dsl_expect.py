from playwright.sync_api import expect as pw_expect, Page, Locator
from wrappers.dsl_locator import DslLocator


class DslExpect:
    def __init__(self, actual):
        if isinstance(actual, DslLocator):
            self.page = actual.page
            unwrapped = actual.locator
        elif isinstance(actual, Locator):
            self.page = actual.page
            unwrapped = actual
        elif isinstance(actual, Page):
            self.page = actual
            unwrapped = actual
        else:
            raise ValueError(f"Unsupported type: {type(actual)}")

        self._inner = pw_expect(unwrapped)

    def __getattr__(self, item):
        return getattr(self._inner, item)

    def __dir__(self):
        return dir(self._inner)

# ---------------- helpers ---------------- #

def expect(actual):
    """Public entry point: works with DslLocator or native Playwright objects."""
    return DslExpect(actual)
