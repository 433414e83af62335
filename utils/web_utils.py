from playwright.sync_api import Locator, Page

TEST_ID_ATTRIBUTE = "data-testid"
READY_STATE_COMPLETE = "complete"


def get_test_id_selector(test_id: str) -> str:
    """
    Builds a CSS attribute selector for the given test id.
    Example: "query" -> '[data-testid="query"]'
    """
    return f'[{TEST_ID_ATTRIBUTE}="{test_id}"]'


def highlight_element(locator: Locator):
    """
    Highlights an element by adding a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "el => el.setAttribute('style', (el.getAttribute('style') || '') + '; border: 2px solid red !important;')"
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: The style string returned from highlight_element().
    """
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)


def is_document_ready(page: Page) -> bool:
    # Playwright has no driver status endpoint, the document state is used instead
    return page.evaluate("() => document.readyState") == READY_STATE_COMPLETE


def get_element_at(elements: list, index: int):
    """
    Returns the element at a computed index.
    Raises IndexError instead of wrapping around for negative indices.
    """
    if index < 0 or index >= len(elements):
        raise IndexError(f"Element index {index} out of range (0..{len(elements) - 1})")
    return elements[index]
