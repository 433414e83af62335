import random
from decorators.class_decorators import auto_getters
from playwright.sync_api import Page
from utils.web_utils import get_element_at, is_document_ready
from wrappers.dsl_locator import DslLocator
from wrappers.dsl_page import DslPage


@auto_getters
class MainPage(DslPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.run_query_button = DslLocator(self, "runQueryButton")
        self.query_text_field = DslLocator(self, "query")
        self.query_result_container = DslLocator(self, "queryResult")
        self.advanced_view_toggle = DslLocator(self, "advancedViewToggle")
        self.query_history_results = DslLocator(self, "queryHistory")
        self.query_history_results_all_elements = DslLocator(self, "queryHistorySingleElement")

    def click_run_query_button(self):
        self.run_query_button.click()

    def set_query_text(self, query: str):
        self.query_text_field.fill(query)

    def get_query_text(self) -> str:
        return self.query_text_field.input_value()

    def get_query_result_text(self) -> str:
        return self.query_result_container.inner_text()

    def get_toggle_value(self) -> bool:
        return self.advanced_view_toggle.is_checked()

    def toggle_advanced_view(self):
        self.advanced_view_toggle.click()

    # "Minus two" counts back from the last entry: third entry from the end
    def find_click_minus_two_queries_in_history(self):
        results = self.query_history_results_all_elements.all()
        get_element_at(results, len(results) - 3).click()

    def get_last_query_history_text(self) -> str:
        results = self.query_history_results_all_elements.all()
        return get_element_at(results, len(results) - 1).inner_text()

    def click_random_item_in_history(self):
        results = self.query_history_results_all_elements.all()
        if not results:
            raise IndexError("Query history is empty")
        get_element_at(results, random.randrange(len(results))).click()

    def get_application_title(self) -> str:
        return self.page.title()

    def check_application_is_ready(self) -> bool:
        return is_document_ready(self.page)
