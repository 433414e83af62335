from urllib.parse import urljoin
from playwright.sync_api import Page
from utils.code_utils import get_effective_config_value, to_bool

APP_URL = "app_url"


class DslPage:
    """
    DslPage is the base of every page object of the query console:
    - Keeps the Playwright Page and the run configuration shared with its DslLocator fields.
    - Opens the query application by its configured base URL.
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config
        self.class_name = self.__class__.__name__

    def get_app_url(self) -> str:
        app_url = get_effective_config_value(APP_URL, self.config)

        if not app_url:
            raise ValueError(f"'{APP_URL}' is not configured for {self.class_name}")
        return app_url

    def open(self, path: str = ""):
        url = urljoin(self.get_app_url(), path)

        if to_bool(self.config.get("log_steps")):
            print(f"[STEP] {self.class_name} -> open({url})")
        return self.page.goto(url)

    def __str__(self):
        return f"<DslPage {self.class_name}>"

    __repr__ = __str__
