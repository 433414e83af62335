from decorators.class_decorators import auto_getters
from enums.theme import Theme
from playwright.sync_api import Page
from wrappers.dsl_locator import DslLocator
from wrappers.dsl_page import DslPage


@auto_getters
class SettingsModal(DslPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.modal = DslLocator(self, "settingsModal")
        self.uri_input = DslLocator(self, "URI")
        self.database_name_input = DslLocator(self, "databaseName")
        self.collection_name_input = DslLocator(self, "collectionName")
        self.light_theme_radio = DslLocator(self, "lightThemeSelector")
        self.dark_theme_radio = DslLocator(self, "darkThemeSelector")
        self.system_theme_radio = DslLocator(self, "systemThemeSelector")
        self.apply_button = DslLocator(self, "applySeetingsModalButton")
        self.cancel_button = DslLocator(self, "cancelSeetingsModalButton")

    def set_uri(self, uri: str):
        self.uri_input.fill(uri)

    def set_database_name(self, name: str):
        self.database_name_input.fill(name)

    def set_collection_name(self, name: str):
        self.collection_name_input.fill(name)

    def select_theme(self, theme: Theme | str):
        # Raises ValueError for anything but light, dark or system
        theme = Theme(theme)
        theme_selector_map = {
            Theme.LIGHT: self.light_theme_radio,
            Theme.DARK: self.dark_theme_radio,
            Theme.SYSTEM: self.system_theme_radio,
        }
        theme_selector_map[theme].click()

    def click_apply_button(self):
        self.apply_button.click()

    def click_cancel_button(self):
        self.cancel_button.click()
